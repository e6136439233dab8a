"""The graphical editor window and the command-line entry point."""

from __future__ import annotations

import argparse
import contextlib
import os
import sys
from typing import Optional

from .document import Editor
from .registry import register_context_menu

TITLE = "Amend Text Editor"
_FILETYPES = [("Text files", "*.txt"), ("All files", "*")]
_REFRESH_MS = 16
_STARTUP_DELAY_MS = 50


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse the command line: an optional file to open on start-up."""
    parser = argparse.ArgumentParser(prog="amendedit", description="A small plain-text editor.")
    parser.add_argument("file", nargs="?", help="file to open on start-up")
    return parser.parse_args(argv)


class EditorWindow:
    """A Tk window showing one Editor."""

    def __init__(self, root, editor: Optional[Editor] = None) -> None:
        import tkinter as tk

        self.root = root
        self.editor = editor if editor is not None else Editor()

        bar = tk.Frame(root)
        bar.pack(side="top", fill="x")
        for label, command in (
            ("New", self.new_file),
            ("Open", self.open_file),
            ("Save", self.save_file),
            ("Save As", self.save_file_as),
        ):
            tk.Button(bar, text=label, command=command).pack(side="left")
        if sys.platform == "win32":
            tk.Button(
                bar, text="Register as Context Menu Editor", command=self._register
            ).pack(side="left")
        self._title = tk.Label(bar, anchor="w")
        self._title.pack(side="left", padx=8)

        self._status = tk.Label(root, anchor="w")
        self._status.pack(side="bottom", fill="x")

        body = tk.Frame(root)
        body.pack(side="top", fill="both", expand=True)
        self._text = tk.Text(body, wrap="none", undo=True, font="TkFixedFont")
        yscroll = tk.Scrollbar(body, orient="vertical", command=self._text.yview)
        xscroll = tk.Scrollbar(body, orient="horizontal", command=self._text.xview)
        self._text.configure(yscrollcommand=yscroll.set, xscrollcommand=xscroll.set)
        yscroll.pack(side="right", fill="y")
        xscroll.pack(side="bottom", fill="x")
        self._text.pack(side="left", fill="both", expand=True)
        self._text.bind("<<Modified>>", self._on_modified)

        for key, handler in (("s", self.save_file), ("o", self.open_file), ("n", self.new_file)):
            sequence = f"<Control-{key}>"
            self._text.bind(sequence, lambda _event, h=handler: (h(), "break")[1])
            root.bind(sequence, lambda _event, h=handler: h())

        self._shown: Optional[str] = None
        self._tick()

    def _tick(self) -> None:
        self.refresh()
        self.root.after(_REFRESH_MS, self._tick)

    def refresh(self) -> None:
        """Bring the widgets in line with the editor state."""
        self.editor.poll()
        if self.editor.text is not self._shown:
            self._text.configure(state="normal")
            self._text.delete("1.0", "end")
            self._text.insert("1.0", self.editor.text)
            self._text.edit_modified(False)
            self._shown = self.editor.text
        self._text.configure(state="disabled" if self.editor.is_loading else "normal")
        self._title.configure(text=self.editor.title())
        self._status.configure(text=self.editor.status_line() or "")

    def _on_modified(self, _event=None) -> None:
        if not self._text.edit_modified():
            return
        self._text.edit_modified(False)
        if self.editor.is_loading:
            return
        self.editor.edit(self._text.get("1.0", "end-1c"))
        self._shown = self.editor.text
        self._title.configure(text=self.editor.title())

    def open_file(self) -> None:
        """Ask for a file and start loading it."""
        from tkinter import filedialog

        path = filedialog.askopenfilename(parent=self.root, filetypes=_FILETYPES)
        if path:
            self.editor.start_loading(path)
            self.refresh()

    def save_file(self) -> None:
        """Save to the current file, or ask for one if there is none."""
        if self.editor.filename is None:
            self.save_file_as()
            return
        with contextlib.suppress(OSError):
            self.editor.save()
        self.refresh()

    def save_file_as(self) -> None:
        """Ask for a file name and save the buffer there."""
        from tkinter import filedialog

        path = filedialog.asksaveasfilename(parent=self.root, filetypes=_FILETYPES)
        if path:
            with contextlib.suppress(OSError):
                self.editor.save_as(path)
        self.refresh()

    def new_file(self) -> None:
        """Start an empty, untitled document."""
        self.editor.new_file()
        self.refresh()

    def _register(self) -> None:
        exe_path = os.path.abspath(sys.argv[0])
        try:
            register_context_menu(exe_path)
        except OSError:
            return
        print("Successfully registered 'Edit with Amend' in context menu")
        print("Icon will be displayed next to the menu item")


def main(argv: Optional[list[str]] = None) -> int:
    """Open the editor window, loading a file given on the command line."""
    args = parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    root.title(TITLE)
    root.geometry("800x600")
    root.minsize(400, 300)
    window = EditorWindow(root, Editor())
    if args.file:
        root.after(_STARTUP_DELAY_MS, lambda: window.editor.start_loading(args.file))
    root.mainloop()
    return 0