from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional

from core.clipboard import Action, ClipboardContext
from core.staging import staging_path

HELP_FLAGS = ("-h", "--help")


class UsageError(Exception):
    """Неверная командная строка: ядро не запускается, код выхода 1."""


@dataclass(frozen=True)
class ParsedArgs:
    help: bool
    action: Optional[str]
    items: List[str]


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(f"╳ {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="clipboard", add_help=False)
    parser.add_argument("action", nargs="?")
    # всё после действия, включая "-notes.txt", это объекты
    parser.add_argument("items", nargs=argparse.REMAINDER)
    return parser


def parse_args(argv: List[str]) -> ParsedArgs:
    # -h/--help срабатывает где угодно и раньше любой другой проверки
    if any(arg in HELP_FLAGS for arg in argv):
        return ParsedArgs(help=True, action=None, items=[])
    ns = build_parser().parse_args(argv)
    return ParsedArgs(help=False, action=ns.action, items=list(ns.items))


def make_context(args: ParsedArgs) -> ClipboardContext:
    """Проверить действие и объекты, собрать контекст запуска."""
    if args.action is None:
        raise UsageError(
            "╳ You did not specify an action. Try adding cut, copy, or paste to the end, "
            "like clipboard copy. If you need more help, try clipboard -h to show the help screen."
        )

    action = Action.parse(args.action)
    if action is None:
        raise UsageError(
            "╳ You did not specify a valid action, or you forgot to include one. "
            "Try using or adding cut, copy, or paste instead, like clipboard copy."
        )

    if action is not Action.PASTE and not args.items:
        raise UsageError(
            f"╳ You need to choose something to {action.value}. "
            f"Try adding the items you want to {action.value} to the end, "
            f"like {action.value} contacts.txt myprogram.cpp"
        )

    items = args.items if action is not Action.PASTE else []
    return ClipboardContext(action=action, staging=staging_path(), items=items)
