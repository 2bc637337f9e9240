"""Application directories, stored files and temporary files for editing."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

import platformdirs

APP_NAME = "TReq"


def data_dir() -> Path:
    """Directory holding the application's data."""
    return platformdirs.user_data_path(APP_NAME, appauthor=False)


def config_dir() -> Path:
    """Directory holding the application's configuration."""
    return platformdirs.user_config_path(APP_NAME, appauthor=False)


def ensure_dir(path: str | Path) -> Path:
    """Create the directory and its parents if they do not exist."""
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def requests_dir(root: str | Path | None = None) -> Path:
    """Directory where saved requests live."""
    return Path(root if root is not None else data_dir()) / "requests"


def data_files_dir(root: str | Path | None = None) -> Path:
    """Directory for other data files."""
    return Path(root if root is not None else data_dir()) / "data"


@dataclass
class StoredFile:
    """A text file at a fixed path."""

    path: Path

    def read(self) -> str:
        """Whole content of the file."""
        return self.path.read_text(encoding="utf-8")

    def write(self, content: str) -> None:
        """Replace the content of the file, creating it if needed."""
        self.path.write_text(content, encoding="utf-8")

    def remove(self) -> None:
        """Delete the file."""
        self.path.unlink()


def _fresh_temp_path(prefix: str, directory: Path | None) -> Path:
    fd, name = tempfile.mkstemp(prefix=prefix, suffix=".json", dir=directory)
    os.close(fd)
    os.unlink(name)
    return Path(name)


class FileEditionHandler:
    """Temporary files, one per key, used to edit text in an external editor."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self._directory = Path(directory) if directory is not None else None
        self._files: dict[str, StoredFile] = {}

    def _file_for(self, key: str) -> StoredFile:
        file = self._files.get(key)
        if file is None:
            file = StoredFile(_fresh_temp_path(key, self._directory))
            self._files[key] = file
        return file

    def get_content(self, key: str) -> str:
        """Content of the key's file; raises OSError if it was never written."""
        return self._file_for(key).read()

    def save_content(self, key: str, content: str) -> None:
        """Write content to the key's file."""
        self._file_for(key).write(content)

    def get_path(self, key: str) -> Path:
        """Path of the key's file."""
        return self._file_for(key).path

    def close(self) -> None:
        """Delete every file this handler created."""
        for file in self._files.values():
            file.path.unlink(missing_ok=True)
        self._files.clear()

    def __enter__(self) -> FileEditionHandler:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()