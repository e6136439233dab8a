"""Registration of the editor in the Windows Explorer context menu."""

from __future__ import annotations

import os

MENU_KEY = "Software\\Classes\\*\\shell\\AmendTextEditor"
COMMAND_KEY = MENU_KEY + "\\command"
MENU_LABEL = "Edit with Amend"


def context_menu_values(exe_path) -> dict[str, dict[str, str]]:
    """Registry keys under HKEY_CURRENT_USER and the string values they get."""
    exe = os.fspath(exe_path)
    return {
        MENU_KEY: {"": MENU_LABEL, "Icon": f"{exe},0"},
        COMMAND_KEY: {"": f'"{exe}" "%1"'},
    }


def register_context_menu(exe_path) -> None:
    """Add 'Edit with Amend' to the context menu of every file."""
    try:
        import winreg
    except ImportError as exc:
        raise OSError("context menu registration requires Windows") from exc

    for key_path, values in context_menu_values(exe_path).items():
        with winreg.CreateKey(winreg.HKEY_CURRENT_USER, key_path) as key:
            for name, value in values.items():
                winreg.SetValueEx(key, name, 0, winreg.REG_SZ, value)