"""
Тексты итоговых сообщений.

Модуль ничего не печатает: он возвращает список Message, а ui.console
раскрашивает и выводит их.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from core.clipboard import Action, ClipboardContext, FailureRecord, SuccessCounts

MAX_LISTED_FAILURES = 5


class Tone(Enum):
    SUCCESS = "success"
    ERROR = "error"
    HINT = "hint"
    PROGRESS = "progress"


@dataclass(frozen=True)
class Message:
    tone: Tone
    text: str


def _plural(n: int, one: str, many: str) -> str:
    return f"{n} {one if n == 1 else many}"


def progress_message(action: Action) -> Message:
    text = {Action.COPY: "Copying...", Action.CUT: "Cutting...", Action.PASTE: "Pasting..."}[action]
    return Message(Tone.PROGRESS, f"• {text}")


def summary_message(ctx: ClipboardContext, counts: SuccessCounts) -> Optional[Message]:
    """
    Итог для cut/copy (None, если сообщать нечего).

    Один оставшийся объект одного типа называется по имени, иначе
    выводятся количества файлов и папок.
    """
    if ctx.action is Action.PASTE or counts.total == 0:
        return None

    verb = ctx.action.verb
    one_kind = (counts.files >= 1) != (counts.directories >= 1)
    if one_kind and len(ctx.items) == 1:
        return Message(Tone.SUCCESS, f"√ {verb} {ctx.items[0]}")

    files = _plural(counts.files, "file", "files")
    dirs = _plural(counts.directories, "directory", "directories")
    if counts.directories == 0:
        return Message(Tone.SUCCESS, f"√ {verb} {files}")
    if counts.files == 0:
        return Message(Tone.SUCCESS, f"√ {verb} {dirs}")
    return Message(Tone.SUCCESS, f"√ {verb} {files} and {dirs}")


def failure_messages(action: Action, failures: List[FailureRecord]) -> List[Message]:
    """Список неудач (не больше MAX_LISTED_FAILURES) и подсказки."""
    if not failures:
        return []

    out = [Message(Tone.ERROR, f"╳ Clipboard couldn't {action.value} these items.")]
    for f in failures[:MAX_LISTED_FAILURES]:
        out.append(Message(Tone.ERROR, f"▏ {f.path}: {f.reason}"))
    if len(failures) > MAX_LISTED_FAILURES:
        out.append(Message(Tone.ERROR, f"▏ ...and {len(failures) - MAX_LISTED_FAILURES} more."))

    out.append(Message(Tone.HINT, "▏ See if you have the needed permissions, or"))
    out.append(Message(Tone.HINT, "▏ try double-checking the spelling of the files or what directory you're in."))
    return out


def paste_message(ok: bool) -> Message:
    if ok:
        return Message(Tone.SUCCESS, "√ Pasted")
    return Message(Tone.ERROR, "╳ Failed to paste")


def internal_error_messages(error: BaseException) -> List[Message]:
    return [
        Message(Tone.ERROR, f"╳ Internal error: {error}"),
        Message(Tone.ERROR, "▏ This is probably a bug."),
    ]
