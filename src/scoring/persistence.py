"""Load and save the player registry as a JSON score file.

The file holds the document produced by PlayerRegistry.serialize(): an
object mapping each player name to their scoreboard. Loading always builds a
fresh registry, so a failed load never touches the registry in use.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from scoring.exceptions import ScoreFileError
from scoring.registry import PlayerRegistry
from shared.storage import JsonFileStorage

if TYPE_CHECKING:
    from shared.storage import DocumentStorage

logger = structlog.get_logger()


def save_registry(registry: PlayerRegistry, path: Path | str, storage: DocumentStorage | None = None) -> None:
    """Write the whole registry to path, replacing any existing file."""
    storage = storage or JsonFileStorage()
    try:
        storage.write(path, registry.serialize())
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("failed to save scores", path=str(path), error=str(exc))
        raise ScoreFileError(path, f"cannot write score file ({exc})") from exc


def load_registry(path: Path | str, storage: DocumentStorage | None = None) -> PlayerRegistry:
    """Read a registry from path.

    Raises ScoreFileError when the file is missing, unreadable, not JSON, or
    not a valid score document.
    """
    storage = storage or JsonFileStorage()
    file_path = Path(path)
    if not file_path.is_file():
        raise ScoreFileError(file_path, "no such score file")

    try:
        document = storage.read(file_path)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        logger.warning("unreadable score file", path=str(file_path), error=str(exc))
        raise ScoreFileError(file_path, f"cannot read score file ({exc})") from exc

    if not isinstance(document, dict):
        raise ScoreFileError(file_path, "expected a JSON object mapping player names to scoreboards")

    try:
        registry = PlayerRegistry.deserialize(document)
    except ValidationError as exc:
        logger.warning("invalid score file", path=str(file_path), errors=exc.error_count())
        raise ScoreFileError(file_path, f"invalid score document ({exc.error_count()} errors)") from exc

    logger.info("loaded scores", path=str(file_path), players=len(registry))
    return registry
