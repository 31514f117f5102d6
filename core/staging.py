import logging
import tempfile
from pathlib import Path

from core.clipboard import Action
from core.ops import clear_dir

logger = logging.getLogger(__name__)

STAGING_DIR_NAME = "Clipboard"


class StagingError(RuntimeError):
    """Буфер нельзя создать или очистить: дальше работать нельзя."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


def staging_path() -> Path:
    """Постоянное место буфера: <temp>/Clipboard."""
    return Path(tempfile.gettempdir()) / STAGING_DIR_NAME


def prepare_staging(action: Action, path: Path) -> None:
    """
    Подготовить буфер перед операцией.
    - cut/copy: содержимое удаляется, в буфере остаётся только новая партия;
    - paste: буфер только читается;
    - если папки нет, она создаётся при любом действии.
    """
    try:
        if path.is_dir():
            if action is not Action.PASTE:
                logger.info("STAGING | clear | %s", path)
                clear_dir(path)
        else:
            logger.info("STAGING | create | %s", path)
            path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("STAGING | %s | %s", path, e)
        raise StagingError(path, e) from e
