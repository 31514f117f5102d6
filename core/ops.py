import logging
import os
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Kind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Classified:
    kind: Kind
    destination_name: str

    @property
    def is_dir(self) -> bool:
        return self.kind is Kind.DIRECTORY


def directory_name(item: PathLike) -> str:
    """
    Имя папки в буфере: последний компонент РОДИТЕЛЬСКОГО пути.
    'a/docs/' -> 'docs', 'a/docs' -> 'a', 'docs' -> '' (корень буфера).
    """
    return os.path.basename(os.path.dirname(os.fspath(item)))


def file_name(item: PathLike) -> str:
    """Имя файла в буфере (для 'a/b/' это пустая строка)."""
    return os.path.basename(os.fspath(item))


def classify(item: PathLike) -> Classified:
    """
    Определить тип объекта и имя назначения в буфере.
    Несуществующий путь считается файлом и упадёт уже при переносе.
    """
    if os.path.isdir(item):
        return Classified(Kind.DIRECTORY, directory_name(item))
    return Classified(Kind.FILE, file_name(item))


def remove_any(path: Path) -> None:
    """Удалить файл, ссылку или папку рекурсивно."""
    logger.info("DELETE | %s", path)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def clear_dir(path: Path) -> None:
    """Удалить всё содержимое папки, сама папка остаётся."""
    for entry in path.iterdir():
        remove_any(entry)


def _drop_conflict(src: Path, dst: Path) -> None:
    """
    Убрать то, что мешает перезаписи dst.
    Ссылку в назначении удаляем всегда (иначе copy2 пишет сквозь неё),
    файл удаляем, если на его место встаёт ссылка (os.symlink не перезаписывает).
    """
    if dst.is_symlink():
        dst.unlink()
    elif src.is_symlink() and dst.exists() and not dst.is_dir():
        dst.unlink()


def _drop_tree_conflicts(src_dir: Path, dst_dir: Path) -> None:
    """Подготовить dst_dir к копированию дерева src_dir поверх него."""
    for root, dirs, files in os.walk(src_dir):
        rel = Path(root).relative_to(src_dir)
        for name in dirs + files:
            _drop_conflict(Path(root) / name, dst_dir / rel / name)


def copy_any(src: Path, dst: Path) -> None:
    """
    Скопировать файл или папку с перезаписью.
    Символические ссылки копируются как ссылки, папка копируется
    содержимым внутрь dst (dst может уже существовать).
    """
    logger.info("COPY | %s -> %s", src, dst)
    if src.is_dir():
        _drop_tree_conflicts(src, dst)
        shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)
        return

    if dst.is_dir() and not dst.is_symlink():
        raise IsADirectoryError(21, os.strerror(21), str(dst))
    _drop_conflict(src, dst)
    shutil.copy2(src, dst, follow_symlinks=False)


def move_any(src: Path, dst: Path) -> None:
    """Переместить файл или папку переименованием (без копирования между дисками)."""
    logger.info("MOVE | %s -> %s", src, dst)
    os.replace(src, dst)


def copy_tree_into(src_dir: Path, dst_dir: Path) -> None:
    """
    Скопировать содержимое src_dir В dst_dir.
    Папки объединяются, одноимённые файлы и ссылки перезаписываются.
    """
    if not src_dir.is_dir():
        raise NotADirectoryError(20, os.strerror(20), str(src_dir))
    if not any(src_dir.iterdir()):
        raise FileNotFoundError(2, "Clipboard is empty", str(src_dir))

    logger.info("PASTE | %s -> %s", src_dir, dst_dir)
    _drop_tree_conflicts(src_dir, dst_dir)
    shutil.copytree(src_dir, dst_dir, symlinks=True, dirs_exist_ok=True)
