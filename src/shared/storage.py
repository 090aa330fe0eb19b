"""Storage abstraction for JSON score files.

Score files are written atomically (temp file in the same directory, then
rename) so a crash mid-write never leaves a truncated file behind. Files get
owner-only permissions (0o600).
"""

import contextlib
import json
import os
import tempfile
from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger()

# Owner-only file permissions for score files.
_SCORE_FILE_MODE = 0o600


class DocumentStorage(Protocol):
    """Protocol for reading and writing whole JSON documents."""

    def read(self, path: Path | str) -> object: ...

    def write(self, path: Path | str, document: object) -> None: ...


class JsonFileStorage:
    """Reads and writes JSON documents on the local filesystem."""

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def read(self, path: Path | str) -> object:
        """Parse the JSON document at path.

        Raises OSError when the file cannot be read and ValueError
        (json.JSONDecodeError) when it is not valid JSON.
        """
        file_path = Path(path)
        content = file_path.read_text(encoding="utf-8")
        document = json.loads(content)
        logger.debug("read document", path=str(file_path), size=len(content))
        return document

    def write(self, path: Path | str, document: object) -> None:
        """Atomically replace the file at path with the serialized document.

        Creates missing parent directories. Serialization happens before any
        file is touched, so an unserializable document leaves the target as
        it was.
        """
        target = Path(path)
        content = json.dumps(document, indent=self._indent, ensure_ascii=False).encode("utf-8")
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=str(target.parent), suffix=".tmp", prefix=".scores_")
        fd_owned = True
        try:
            with os.fdopen(fd, "wb") as f:
                fd_owned = False  # os.fdopen took ownership; it will close fd
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, _SCORE_FILE_MODE)  # noqa: PTH101
            Path(tmp_path).replace(target)
        except BaseException:
            if fd_owned:
                with contextlib.suppress(OSError):
                    os.close(fd)
            with contextlib.suppress(OSError):
                Path(tmp_path).unlink()
            raise
        logger.info("saved document", path=str(target), size=len(content))
