"""
File storage capability used by the settings store.

The store never touches the filesystem directly; it is handed an object with
``read``/``write``/``delete``/``copy`` so hosts can plug in their own file
primitives and tests can plug in failing ones.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Protocol, Union

PathLike = Union[str, Path]

logger = logging.getLogger(__name__)


class FileStorage(Protocol):
    """File primitives the settings store depends on."""

    def read(self, path: PathLike) -> bytes:
        """Return file content. Raises FileNotFoundError if missing."""
        ...

    def write(self, path: PathLike, data: bytes) -> None:
        """Replace file content so readers never see a partial file."""
        ...

    def delete(self, path: PathLike) -> None:
        """Remove a file. Missing files are ignored."""
        ...

    def copy(self, src: PathLike, dst: PathLike) -> None:
        """Copy a file. Raises FileNotFoundError if src is missing."""
        ...


class LocalFileStorage:
    """FileStorage backed by the local filesystem."""

    def read(self, path: PathLike) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def write(self, path: PathLike, data: bytes) -> None:
        """Write to a temp file in the same directory, then rename it over path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            # Atomic rename
            os.replace(temp_name, target)
        except BaseException:
            try:
                os.unlink(temp_name)
            except OSError:
                pass
            raise

        logger.debug(f"Wrote {len(data)} bytes to {target}")

    def delete(self, path: PathLike) -> None:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass

    def copy(self, src: PathLike, dst: PathLike) -> None:
        Path(dst).parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dst)
