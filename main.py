import logging
import sys
from pathlib import Path
from typing import List, Optional

from core.clipboard import Action, ClipboardContext
from core.log_setup import setup_logging
from core.report import failure_messages, internal_error_messages, paste_message, summary_message
from core.staging import prepare_staging
from core.transfer import drop_failed, paste, transfer_items
from core.verify import count_successes
from ui.cli import UsageError, make_context, parse_args
from ui import console

logger = logging.getLogger(__name__)


def run(ctx: ClipboardContext) -> None:
    """classify -> подготовка буфера -> перенос -> проверка -> отчёт."""
    console.show_indicator(ctx.action)
    prepare_staging(ctx.action, ctx.staging)

    if ctx.action is Action.PASTE:
        console.show_messages([paste_message(paste(ctx, Path.cwd()))])
        return

    failures = transfer_items(ctx)
    console.show_messages(failure_messages(ctx.action, failures))

    ctx = drop_failed(ctx, failures)
    counts = count_successes(ctx)
    logger.info("DONE | %s | files=%d dirs=%d failed=%d",
                ctx.action.value, counts.files, counts.directories, len(failures))

    summary = summary_message(ctx, counts)
    if summary is not None:
        console.show_messages([summary])


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    try:
        args = parse_args(argv)
        if args.help:
            console.show_help()
            return 0
        setup_logging()
        ctx = make_context(args)
    except UsageError as e:
        console.show_usage_error(str(e))
        return 1

    try:
        run(ctx)
    except Exception as e:
        logger.error("INTERNAL | %s", e)
        console.show_messages(internal_error_messages(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
