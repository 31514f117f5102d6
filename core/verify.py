import os

from core.clipboard import Action, ClipboardContext, SuccessCounts
from core.ops import directory_name, file_name


def _holds_file(path) -> bool:
    return os.path.lexists(path) and not os.path.isdir(path)


def count_successes(ctx: ClipboardContext) -> SuccessCounts:
    """
    Пересчитать успехи по факту: для каждого объекта проверяется,
    есть ли в буфере его место назначения.

    copy: тип берётся у источника (он остаётся на месте).
    cut: источника уже нет, поэтому тип определяется по месту назначения.
    paste не считается.
    """
    counts = SuccessCounts()
    if ctx.action is Action.PASTE:
        return counts

    for item in ctx.items:
        dir_dst = ctx.staging / directory_name(item)
        file_dst = ctx.staging / file_name(item)

        if ctx.action is Action.COPY:
            if os.path.isdir(item):
                if dir_dst.exists():
                    counts.directories += 1
            elif os.path.lexists(file_dst):
                counts.files += 1
        else:
            if _holds_file(file_dst):
                counts.files += 1
            elif dir_dst.is_dir():
                counts.directories += 1

    return counts
