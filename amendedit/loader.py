"""Background loading of text files in small chunks with progress reporting."""

from __future__ import annotations

import os
import threading
import time
from dataclasses import dataclass, replace
from typing import Callable, Optional

CHUNK_SIZE = 512
PARTIAL_LIMIT = 2048
LARGE_FILE_THRESHOLD = 100 * 1024 * 1024
MAX_PREVIEW_BYTES = 10 * 1024 * 1024
SMALL_FILE_PAUSE = 0.001
LARGE_FILE_PAUSE = 0.002
TRUNCATION_NOTICE = "\n\n... (file truncated - too large to display completely)"


@dataclass(frozen=True)
class LoadProgress:
    """A snapshot of how far a file load has come."""

    bytes_loaded: int = 0
    total_bytes: int = 0
    partial: str = ""

    def percent(self) -> Optional[int]:
        """Whole percentage loaded, or None when the total size is unknown."""
        if self.total_bytes <= 0:
            return None
        return int(self.bytes_loaded / self.total_bytes * 100)

    def describe(self) -> str:
        """Human-readable byte counts for a status bar."""
        pct = self.percent()
        if pct is None:
            return f"({self.bytes_loaded} bytes loaded)"
        return f"({self.bytes_loaded} / {self.total_bytes} bytes, {pct}%)"


ProgressCallback = Callable[[LoadProgress], None]


def load_text(
    path,
    progress: Optional[ProgressCallback] = None,
    pause: Optional[float] = None,
) -> str:
    """Read a file as UTF-8 in 512-byte chunks.

    Chunks that are not valid UTF-8 on their own are skipped. Files larger
    than LARGE_FILE_THRESHOLD are cut off after MAX_PREVIEW_BYTES with a
    notice appended. An unreadable file yields an empty string.
    """
    try:
        total = os.path.getsize(path)
    except OSError:
        total = 0

    large = total > LARGE_FILE_THRESHOLD
    if pause is None:
        pause = LARGE_FILE_PAUSE if large else SMALL_FILE_PAUSE
    report_every = 4096 if large else 2048

    state = LoadProgress(total_bytes=total)
    if progress is not None:
        progress(state)

    parts: list[str] = []
    read = 0
    try:
        handle = open(path, "rb")
    except OSError:
        return ""

    with handle:
        while True:
            try:
                chunk = handle.read(CHUNK_SIZE)
            except OSError:
                break
            if not chunk:
                break

            try:
                decoded = chunk.decode("utf-8")
            except UnicodeDecodeError:
                decoded = None

            if decoded is not None:
                parts.append(decoded)
                read += len(chunk)
                updated = state
                if read <= PARTIAL_LIMIT and read % CHUNK_SIZE < 256:
                    updated = replace(updated, partial="".join(parts))
                if read % report_every < CHUNK_SIZE:
                    updated = replace(updated, bytes_loaded=read)
                truncated = large and read >= MAX_PREVIEW_BYTES
                if truncated:
                    parts.append(TRUNCATION_NOTICE)
                    updated = replace(updated, bytes_loaded=read)
                if updated is not state:
                    state = updated
                    if progress is not None:
                        progress(state)
                if truncated:
                    break

            if pause:
                time.sleep(pause)

    return "".join(parts)


class FileLoader:
    """Loads one file on a background thread."""

    def __init__(self, path, pause: Optional[float] = None) -> None:
        self.path = os.fspath(path)
        self._pause = pause
        self._lock = threading.Lock()
        self._progress = LoadProgress()
        self._content: Optional[str] = None
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Begin loading; a loader can only be started once."""
        if self._thread is not None:
            raise RuntimeError("loader already started")
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        content = load_text(self.path, self._update, self._pause)
        with self._lock:
            self._content = content

    def _update(self, progress: LoadProgress) -> None:
        with self._lock:
            self._progress = progress

    def snapshot(self) -> LoadProgress:
        """The most recent progress report."""
        with self._lock:
            return self._progress

    def result(self) -> Optional[tuple[str, str]]:
        """(path, content) once loading has finished, otherwise None."""
        with self._lock:
            if self._content is None:
                return None
            return self.path, self._content