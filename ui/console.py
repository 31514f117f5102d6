from typing import Iterable

from rich.console import Console
from rich.text import Text

from core.clipboard import Action
from core.report import Message, Tone, progress_message

VERSION = "0.1.0"

# палитра xterm-256
TONE_STYLES = {
    Tone.SUCCESS: "color(40)",
    Tone.ERROR: "color(196)",
    Tone.HINT: "color(219)",
    Tone.PROGRESS: "color(214)",
}
HEADING = "color(51)"
EXAMPLE = "color(208)"

console = Console(highlight=False)


def _line(text: str, style: str, end: str = "\n") -> None:
    # Text, а не строка: имена файлов вида [x] не должны разбираться как разметка
    console.print(Text(text, style=style), end=end, soft_wrap=True)


def show_messages(messages: Iterable[Message]) -> None:
    for m in messages:
        _line(m.text, TONE_STYLES[m.tone])


def show_indicator(action: Action) -> None:
    m = progress_message(action)
    _line(m.text, TONE_STYLES[m.tone], end="\r")
    console.file.flush()


def show_usage_error(text: str) -> None:
    _line(text, TONE_STYLES[Tone.ERROR])


def show_help() -> None:
    _line(f"▏This is Clipboard {VERSION}, the copy and paste system for the command line.", HEADING)
    _line("▏How To Use", f"bold {HEADING}")
    _line("▏clipboard cut [options] (item) [items]", EXAMPLE)
    _line("▏clipboard copy [options] (item) [items]", EXAMPLE)
    _line("▏clipboard paste [options]", EXAMPLE)
    _line("▏Options: -h/--help shows this screen. Every other argument after the action is an item.", HEADING)
    _line('▏You can substitute "cb" for "clipboard" to save time.', HEADING)
    _line("▏Examples", f"bold {HEADING}")
    _line("▏cb cut nuclearlaunchcodes.txt Contacts_Folder", EXAMPLE)
    _line("▏clipboard copy dogfood.conf", EXAMPLE)
    _line("▏cb paste", EXAMPLE)
    _line("▏Copyright (C) 2022 Jackson Huff. Licensed under the GPLv3.", HEADING)
    _line(
        "▏This program comes with ABSOLUTELY NO WARRANTY. This is free software, "
        "and you are welcome to redistribute it under certain conditions.",
        HEADING,
    )
