"""Application configuration gathered at start-up."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from termreq.files import FileEditionHandler, data_files_dir, ensure_dir, requests_dir
from termreq.save_files import SaveFiles
from termreq.view_config import ViewConfig


@dataclass(frozen=True)
class ExternalEditor:
    """The program used to edit text outside the application."""

    editor: str

    @classmethod
    def from_env(cls) -> ExternalEditor:
        """Read the editor from the EDITOR variable; LookupError if it is not set."""
        editor = os.environ.get("EDITOR")
        if editor is None:
            raise LookupError("environment variable not found: EDITOR")
        return cls(editor)


@dataclass
class ConfigManager:
    """Saved requests, editor, layout and temporary edition files."""

    saved_requests: SaveFiles
    editor: ExternalEditor
    view: ViewConfig = field(default_factory=ViewConfig)
    edition_files_handler: FileEditionHandler = field(default_factory=FileEditionHandler)

    @classmethod
    def setup_env(cls, root: str | Path | None = None) -> None:
        """Create the folders the application stores its files in."""
        ensure_dir(requests_dir(root))
        ensure_dir(data_files_dir(root))

    @classmethod
    def load(cls, root: str | Path | None = None) -> ConfigManager:
        """Load saved requests under root and read the editor from the environment."""
        saved_requests = SaveFiles.load(requests_dir(root))
        editor = ExternalEditor.from_env()
        return cls(saved_requests=saved_requests, editor=editor)