"""Launches an external editor for a note."""

import os.path
import subprocess
import sys
from typing import List


def vscode_command(path: str) -> List[str]:
    """Returns the command line for opening the note in VS Code.

    The note's directory is opened as the workspace folder, reusing an existing window if there is one.
    """
    folder = os.path.dirname(path)
    if sys.platform.startswith('win'):
        return ['cmd', '/C', 'start', 'code', '--new-window', '--reuse-window',
                '--folder-uri', f'file:///{folder}', path]
    return ['code', '--new-window', '--reuse-window', '--folder-uri', f'file://{folder}', path]


def run_editor(command: List[str]) -> int:
    """Runs the command and waits for it to exit, returning its exit status.

    Raises :exc:`OSError` (typically :exc:`FileNotFoundError`) if the process cannot be started.
    """
    return subprocess.run(command).returncode
