"""
Pytest configuration and shared fixtures.

Puts 'src' on sys.path so the tests run without installing the package.
"""

import io
import os
import sys
from typing import Callable, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def read_lines() -> Callable[[bytes], List[str]]:
    """Return a helper collecting all lossy lines of in-memory bytes."""
    from lines_lossy import lines_lossy

    def _read(data: bytes) -> List[str]:
        return list(lines_lossy(io.BytesIO(data)))

    return _read


@pytest.fixture
def config_file(tmp_path) -> Callable[[str], str]:
    """Return a helper writing a [READER] ini body to a temp file."""

    def _write(body: str) -> str:
        path = tmp_path / "config.ini"
        path.write_text("[READER]\n" + body, encoding="utf-8")
        return str(path)

    return _write
