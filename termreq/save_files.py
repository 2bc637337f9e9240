"""Requests saved as JSON files in a directory."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from termreq.files import StoredFile, ensure_dir, requests_dir
from termreq.ids import new_id
from termreq.web import Request


class SaveFiles:
    """Saved requests, each kept in its own file and known by an identifier."""

    def __init__(self, directory: str | Path, files: dict[str, StoredFile] | None = None) -> None:
        self.directory = Path(directory)
        self.files: dict[str, StoredFile] = dict(files or {})

    @classmethod
    def load(cls, directory: str | Path | None = None) -> SaveFiles:
        """Create the directory if needed and pick up every file holding a valid request.

        Each file found gets a fresh identifier; unreadable or invalid files are skipped.
        """
        folder = ensure_dir(directory if directory is not None else requests_dir())
        files: dict[str, StoredFile] = {}
        for path in sorted(folder.iterdir()):
            stored = StoredFile(path)
            try:
                Request.from_json(stored.read())
            except (OSError, ValueError):
                continue
            files[new_id()] = stored
        return cls(folder, files)

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, key: object) -> bool:
        return key in self.files

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def get_file(self, key: str) -> StoredFile | None:
        """File saved under the key, if any."""
        return self.files.get(key)

    def get_request(self, key: str) -> Request:
        """Request stored under the key; KeyError if unknown, ValueError if the file is invalid."""
        return Request.from_json(self.files[key].read())

    def set(self, key: str, request: Request) -> None:
        """Write the request to the key's file, creating a file named after the key if needed."""
        stored = self.files.get(key)
        if stored is None:
            stored = StoredFile(self.directory / key)
        stored.write(request.to_json())
        self.files[key] = stored

    def remove(self, key: str) -> None:
        """Delete the file saved under the key; KeyError if the key is unknown."""
        stored = self.files[key]
        stored.remove()
        del self.files[key]