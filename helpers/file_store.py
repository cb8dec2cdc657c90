"""Thin wrapper around a single file on disk."""

from __future__ import annotations

import os
from pathlib import Path


class FileStore:
    """Exclusive-create, read, write and delete for one path.

    OS errors are not caught; callers see FileExistsError,
    FileNotFoundError and friends directly.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def open(self, rewrite: bool = False) -> int:
        """Create the file exclusively and return its descriptor.

        With ``rewrite`` an existing file is removed and created again.
        """
        try:
            return os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
        except FileExistsError:
            if not rewrite:
                raise
        self.path.unlink()
        return os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def write(self, data: str | bytes) -> None:
        if isinstance(data, bytes):
            self.path.write_bytes(data)
        else:
            self.path.write_text(data, encoding="utf-8")

    def delete(self) -> None:
        self.path.unlink()

    @staticmethod
    def close(fd: int) -> None:
        os.close(fd)
