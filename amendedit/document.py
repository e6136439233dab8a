"""Editor state: the text buffer, its file and background loading."""

from __future__ import annotations

import os
from typing import Optional

from .loader import FileLoader


class Editor:
    """The document being edited, independent of any user interface."""

    def __init__(self, pause: Optional[float] = None) -> None:
        self._pause = pause
        self.text = ""
        self.filename: Optional[str] = None
        self.is_modified = False
        self.loading_filename: Optional[str] = None
        self._loader: Optional[FileLoader] = None
        self._last_partial = ""

    @property
    def is_loading(self) -> bool:
        return self._loader is not None

    def new_file(self) -> None:
        """Clear the buffer and abandon any load in progress."""
        self.text = ""
        self.filename = None
        self.is_modified = False
        self.loading_filename = None
        self._loader = None
        self._last_partial = ""

    def start_loading(self, path) -> None:
        """Start loading a file in the background."""
        file_loader = FileLoader(os.fspath(path), self._pause)
        self._loader = file_loader
        self._last_partial = ""
        self.loading_filename = file_loader.path
        file_loader.start()

    def poll(self) -> bool:
        """Take in loading progress; True when a load has just completed."""
        file_loader = self._loader
        if file_loader is None:
            return False
        partial = file_loader.snapshot().partial
        if partial and partial is not self._last_partial:
            self._last_partial = partial
            self.text = partial
        done = file_loader.result()
        if done is None:
            return False
        path, content = done
        self.text = content
        self.filename = path
        self.is_modified = False
        self.loading_filename = None
        self._loader = None
        self._last_partial = ""
        return True

    def edit(self, text: str) -> None:
        """Replace the buffer with edited text; ignored while loading."""
        if self.is_loading or text == self.text:
            return
        self.text = text
        self.is_modified = True

    def save(self) -> None:
        """Write the buffer to its current file."""
        if self.filename is None:
            raise ValueError("document has no file name; use save_as")
        self._write(self.filename)
        self.is_modified = False

    def save_as(self, path) -> None:
        """Write the buffer to a new file and make it the current one."""
        target = os.fspath(path)
        self._write(target)
        self.filename = target
        self.is_modified = False

    def _write(self, path: str) -> None:
        with open(path, "wb") as handle:
            handle.write(self.text.encode("utf-8"))

    def title(self) -> str:
        """Text for the title area of the menu bar."""
        if self.is_loading:
            if self.loading_filename:
                return f"Loading: {self.loading_filename}"
            return "Loading..."
        if self.filename is not None:
            return f"*{self.filename}" if self.is_modified else self.filename
        return "Untitled"

    def status_line(self) -> Optional[str]:
        """Loading status for the bottom bar, or None when idle."""
        if self._loader is None:
            return None
        description = self._loader.snapshot().describe()
        return f"Loading: {self.loading_filename} {description}"