from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from flightlog.errors import EditorIo


@dataclass
class FakeEditor:
    """
    Stands in for a real editor: records what it was asked to open, then overwrites the
    file with `text` or `raw` bytes (if set) and returns `status`
    """

    text: Optional[str] = None
    raw: Optional[bytes] = None
    status: int = 0
    fail: bool = False
    opened: list[Path] = field(default_factory=list)
    seen: list[str] = field(default_factory=list)

    def launch(self, path: Path) -> int:
        if self.fail:
            raise EditorIo("Could not run editor 'fake'") from FileNotFoundError(
                "no such editor"
            )

        self.opened.append(path)
        self.seen.append(path.read_text(encoding="utf-8"))
        if self.text is not None:
            path.write_text(self.text, encoding="utf-8")
        if self.raw is not None:
            path.write_bytes(self.raw)
        return self.status


@pytest.fixture
def fake_editor() -> Callable[..., Any]:
    """
    Factory for editor doubles, e.g. fake_editor(text="notes\n")
    """
    return FakeEditor


@pytest.fixture
def note_path(tmp_path: Path) -> Path:
    return Path(tmp_path, "notes.txt")


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return Path(tmp_path, "data", "flightlog", "flights.jsonl")
