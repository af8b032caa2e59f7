"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows ``import common_contracts`` to work straight from a checkout,
without installing the package first.
"""

import sys
from pathlib import Path


def _ensure_src_on_sys_path() -> None:
    """Add src/ to sys.path if missing."""
    repo_root = Path(__file__).resolve().parents[1]
    src_str = str(repo_root / "src")
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_sys_path()
