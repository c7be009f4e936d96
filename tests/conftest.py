"""Ensure `src/` is importable when running `pytest` from the repo root without installing."""

from __future__ import annotations

import pathlib
import sys

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


import logging

import pytest
from _pytest.logging import LogCaptureHandler


@pytest.hookimpl(wrapper=True, trylast=True)
def pytest_runtest_call(item):
    """For tests using `bare_root`, keep pytest's own log-capture handlers off the root logger."""
    if "bare_root" not in getattr(item, "fixturenames", ()):
        return (yield)
    root = logging.getLogger()
    captured = [h for h in root.handlers if isinstance(h, LogCaptureHandler)]
    for h in captured:
        root.removeHandler(h)
    return (yield)
