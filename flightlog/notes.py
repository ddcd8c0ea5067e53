"""
Getting notes for a flight, either straight from the command line or by opening an
editor on a temporary file
"""

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from flightlog.constants import DEFAULT_NOTE_FILE, NOTES_TEMPLATE
from flightlog.errors import EditorIo

logger = logging.getLogger(__name__)


class Editor(Protocol):
    def launch(self, path: Path) -> int:
        """
        Open the file at path for editing and block until the user is done. Returns
        the exit status, raises EditorIo if the editor couldn't be run at all.
        """
        ...


@dataclass
class SubprocessEditor:
    """
    Runs an external editor, e.g. "vim" or "code --wait", with the file path as the
    last argument
    """

    command: str

    def launch(self, path: Path) -> int:
        try:
            args = shlex.split(self.command) + [str(path)]
            logger.debug(f"Running editor: {args}")
            return subprocess.run(args).returncode
        except (OSError, ValueError) as e:
            raise EditorIo(f"Could not run editor '{self.command}'") from e


def strip_comments(text: str) -> str:
    """
    Drop every line starting with '#'. The remaining lines are kept in order, without
    a trailing newline.
    """
    lines = [line for line in text.split("\n") if not line.startswith("#")]
    stripped = "\n".join(lines)
    if stripped.endswith("\n"):
        stripped = stripped[:-1]
    return stripped


@dataclass
class NotesAcquirer:
    editor: Editor
    note_path: Path = DEFAULT_NOTE_FILE
    template: str = NOTES_TEMPLATE

    def acquire(self, inline: Optional[str] = None) -> str:
        """
        Returns the notes for a flight. Inline notes are used verbatim, even when
        empty. Otherwise the editor is opened on note_path, pre-filled with the
        template, and whatever is left after stripping comments is returned.

        The note file is left behind afterwards.
        """
        if inline is not None:
            return inline

        try:
            self.note_path.write_text(self.template, encoding="utf-8")
        except OSError as e:
            raise EditorIo(f"Could not write notes file {self.note_path}") from e

        status = self.editor.launch(self.note_path)
        if status != 0:
            logger.warning(f"Editor exited with status {status}, using notes anyway")

        try:
            text = self.note_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise EditorIo(f"Could not read notes file {self.note_path}") from e

        return strip_comments(text)
