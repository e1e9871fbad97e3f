"""Shared fixtures and helpers for tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from snippet_resolver.fetch.memory import InMemoryContentFetcher

_REPO_ROOT = Path(__file__).parent.parent

RAW_BASE = "https://raw.githubusercontent.com/u/r/main"
BLOB_BASE = "https://github.com/u/r/blob/main"
GIST_API = "https://api.github.com/gists/abc123"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def numbered_lines(count: int, prefix: str = "line") -> str:
    """Return ``count`` newline-joined lines ``"<prefix> 1"`` … ``"<prefix> count"``."""
    return "\n".join(f"{prefix} {i}" for i in range(1, count + 1))


def gist_metadata(files: dict[str, str], truncated: frozenset[str] = frozenset()) -> str:
    """Build a Gist API response body for the given ``{filename: content}`` mapping."""
    entries: dict[str, Any] = {}
    for name, content in files.items():
        entries[name] = {
            "filename": name,
            "content": "" if name in truncated else content,
            "truncated": name in truncated,
            "raw_url": f"https://gist.githubusercontent.com/alice/abc123/raw/{name}",
        }
    return json.dumps({"id": "abc123", "files": entries})


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fetcher() -> InMemoryContentFetcher:
    return InMemoryContentFetcher()


@pytest.fixture
def go_file(fetcher: InMemoryContentFetcher) -> str:
    """Register a 50-line Go file and return its blob URL (without line marker)."""
    fetcher.add(f"{RAW_BASE}/f.go", numbered_lines(50))
    return f"{BLOB_BASE}/f.go"
