"""
Local File Storage Implementation

Each resource is one file inside an application-private directory
(~/.moneymate by default).

TRADEOFFS:
- Whole-file rewrites on every save (fine for a personal ledger)
- Single writer assumed; no file locking

Writes go to a temporary file in the same directory which is then moved
over the target with os.replace, so a crash mid-write leaves the previous
contents intact.
"""

import os
import tempfile
from pathlib import Path
from typing import Union

from moneymate.services.storage.interface import (
    ByteStoreInterface,
    NotFoundError,
    StorageAccessError,
    StorageError,
)


class LocalFileByteStore(ByteStoreInterface):
    """Byte store backed by files in a single directory."""

    def __init__(self, directory: Union[str, Path]):
        self._directory = Path(directory).expanduser()

    @property
    def directory(self) -> Path:
        return self._directory

    def _path_for(self, name: str) -> Path:
        """Map a resource name to a file path, refusing anything outside the directory."""
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise StorageError(f"Invalid resource name: {name!r}")
        return self._directory / name

    def read(self, name: str) -> bytes:
        path = self._path_for(name)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise NotFoundError(f"No stored resource named {name!r} in {self._directory}")
        except OSError as e:
            raise StorageAccessError(f"Could not read {path}: {e}") from e

    def write(self, name: str, data: bytes) -> None:
        path = self._path_for(name)
        tmp_name = None
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._directory,
                prefix=f".{name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise StorageAccessError(f"Could not write {path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

    def exists(self, name: str) -> bool:
        return self._path_for(name).is_file()

    def delete(self, name: str) -> None:
        path = self._path_for(name)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageAccessError(f"Could not delete {path}: {e}") from e
