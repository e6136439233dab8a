# amendedit

amendedit is a small plain-text editor. It reads files on a background
thread, so the window stays responsive during a load. A status line shows
how many bytes have been read so far.

## Installing

```
pip install .
```

The window uses Tk from the Python standard library. The package needs no
other libraries. To run the tests, install the `test` extra:
`pip install .[test]`.

## Running

```
amend-editor
amend-editor notes.txt
```

If you give a path, that file starts loading shortly after the window
opens.

The toolbar has four buttons: **New**, **Open**, **Save** and **Save As**.
The keyboard shortcuts are:

- `Ctrl+N`: start a new, empty document
- `Ctrl+O`: open a file
- `Ctrl+S`: save. If the document has no path yet, you are asked for one.

The title label changes with the document's state:

- `Untitled` for a new document.
- The file path for a saved document.
- The file path with a leading `*` when there are unsaved changes.
- `Loading: <path>` while a file is being read.

While a file loads, the text area is read-only. A bottom line shows the
progress, for example `(2048 / 10000 bytes, 20%)`.

## How files are read

Files are read as UTF-8 in 512-byte chunks. A chunk that is not valid UTF-8
on its own is skipped. A file that cannot be opened loads as empty text.

The first 2 KB appear in the editor while the rest of the file is still
loading.

A file larger than 100 MiB is not read in full. The editor reads its first
10 MiB and then adds a note saying the file was truncated.

A failed save is ignored by the window. The document stays marked as
modified.

## On Windows

On Windows, the toolbar also has a **Register as Context Menu Editor**
button. It adds an "Edit with Amend" entry to the Explorer context menu for
all files. The entry is written under `HKEY_CURRENT_USER`.

## Using it from Python

```python
import time
from amendedit.document import Editor

editor = Editor()
editor.start_loading("notes.txt")
while not editor.poll():
    print(editor.status_line())
    time.sleep(0.05)
editor.edit(editor.text + "\nanother line")
editor.save()
```

The main pieces are:

- `Editor.poll()`: returns `True` once a load has just finished.
- `Editor.save()`: raises `ValueError` when the document has no file name. Use `Editor.save_as(path)` in that case.
- `amendedit.loader.load_text(path, progress, pause)`: reads a file synchronously.
- `amendedit.loader.FileLoader`: runs one background read.
  - `snapshot()` returns the latest `LoadProgress`.
  - `result()` returns `(path, content)` when the read is done, and `None` until then.
- `amendedit.registry.context_menu_values(exe_path)`: returns the registry keys and values without writing them.
- `amendedit.registry.register_context_menu(exe_path)`: writes the keys. It raises `OSError` off Windows.

## What it does not do

- It has no undo history of its own beyond what the Tk text widget provides.
- It does not ask before discarding unsaved changes.
- It has no search, no syntax highlighting and no encoding choice.