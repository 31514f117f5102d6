from __future__ import annotations

import shutil
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import List, Optional


class Action(Enum):
    CUT = "cut"
    COPY = "copy"
    PASTE = "paste"

    @classmethod
    def parse(cls, value: str) -> Optional["Action"]:
        """Действие по имени из командной строки (или None, если не распознано)."""
        for action in cls:
            if action.value == value:
                return action
        return None

    @property
    def verb(self) -> str:
        """Глагол для итоговых сообщений."""
        return {Action.CUT: "Cut", Action.COPY: "Copied", Action.PASTE: "Pasted"}[self]


@dataclass(frozen=True)
class ClipboardContext:
    action: Action
    staging: Path
    items: List[str] = field(default_factory=list)  # как их ввёл пользователь

    def without(self, paths: List[str]) -> "ClipboardContext":
        drop = set(paths)
        return replace(self, items=[x for x in self.items if x not in drop])


@dataclass(frozen=True)
class FailureRecord:
    path: str
    error: OSError

    @property
    def reason(self) -> str:
        # shutil.Error из copytree несёт список (src, dst, причина)
        if isinstance(self.error, shutil.Error) and self.error.args:
            errors = self.error.args[0]
            if isinstance(errors, list) and errors:
                return str(errors[0][-1])
        return self.error.strerror or str(self.error)


@dataclass(frozen=True)
class ItemResult:
    item: str
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SuccessCounts:
    files: int = 0
    directories: int = 0

    @property
    def total(self) -> int:
        return self.files + self.directories
