"""
Test doubles shared by unit and integration tests.

- RecordingSource: in-memory InputSource that counts reads per path
- CountingSolver: compute function that counts its invocations
- RecordingOpener: UrlOpener that records URLs instead of launching anything
- load_fixture: JSON fixtures under tests/fixtures
"""

import json
from pathlib import Path
from typing import Dict, List, Optional

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    """Load JSON fixture file (path relative to tests/fixtures)"""
    with open(FIXTURES_DIR / name, "r") as f:
        return json.load(f)


class RecordingSource:
    def __init__(self, files: Optional[Dict[Path, str]] = None):
        self.files: Dict[Path, str] = dict(files or {})
        self.reads: List[Path] = []

    def read(self, path: Path) -> Optional[str]:
        self.reads.append(Path(path))
        return self.files.get(Path(path))


class CountingSolver:
    def __init__(self, result: str = "42"):
        self.result = result
        self.calls: List[str] = []

    def __call__(self, text: str) -> str:
        self.calls.append(text)
        return self.result


class RecordingOpener:
    def __init__(self):
        self.urls: List[str] = []

    def open(self, url: str) -> None:
        self.urls.append(url)

