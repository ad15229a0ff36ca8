"""Tests for running lazyspf as a module (`python -m lazyspf`)."""

from __future__ import annotations

import runpy
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    with patch("sys.argv", ["lazyspf", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("lazyspf", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_subcommand_help_exits_zero() -> None:
    with patch("sys.argv", ["lazyspf", "path", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("lazyspf", run_name="__main__")
    assert exc_info.value.code == 0
