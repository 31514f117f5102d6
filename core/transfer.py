import logging
from pathlib import Path
from typing import List

from core.clipboard import Action, ClipboardContext, FailureRecord, ItemResult
from core.ops import classify, copy_any, copy_tree_into, move_any

logger = logging.getLogger(__name__)


def transfer_item(ctx: ClipboardContext, item: str) -> ItemResult:
    """
    Перенести один объект в буфер (copy или cut).
    Ошибка файловой системы возвращается в результате, а не пробрасывается.
    """
    target = classify(item)
    dst = ctx.staging / target.destination_name
    src = Path(item)

    try:
        if target.is_dir:
            dst.mkdir(parents=True, exist_ok=True)
        if ctx.action is Action.CUT:
            move_any(src, dst)
        else:
            copy_any(src, dst)
    except OSError as e:
        logger.warning("FAILED | %s | %s", item, e)
        return ItemResult(item, e)

    return ItemResult(item)


def transfer_items(ctx: ClipboardContext) -> List[FailureRecord]:
    """Перенести все объекты по порядку; один сбой не останавливает остальные."""
    if ctx.action is Action.PASTE:
        raise ValueError("transfer_items: paste is not an item-wise action")

    failures: List[FailureRecord] = []
    for item in ctx.items:
        result = transfer_item(ctx, item)
        if not result.ok:
            failures.append(FailureRecord(result.item, result.error))
    return failures


def paste(ctx: ClipboardContext, dst_dir: Path) -> bool:
    """Вставить весь буфер в dst_dir одной операцией. True при успехе."""
    try:
        copy_tree_into(ctx.staging, dst_dir)
    except OSError as e:
        logger.warning("FAILED | paste | %s", e)
        return False
    return True


def drop_failed(ctx: ClipboardContext, failures: List[FailureRecord]) -> ClipboardContext:
    """Убрать из контекста объекты, перенос которых не удался."""
    return ctx.without([f.path for f in failures])
