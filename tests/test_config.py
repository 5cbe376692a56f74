"""Unit tests for the config module."""

import pytest

from proquints.config import load_separator


class TestLoadSeparator:

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("PROQUINTS_SEPARATOR", raising=False)
        assert load_separator() == "-"

    def test_default_when_empty(self, monkeypatch):
        monkeypatch.setenv("PROQUINTS_SEPARATOR", "")
        assert load_separator() == "-"

    def test_override(self, monkeypatch):
        monkeypatch.setenv("PROQUINTS_SEPARATOR", ".")
        assert load_separator() == "."

    @pytest.mark.parametrize("value", ["--", "é"])
    def test_invalid_raises(self, monkeypatch, value):
        monkeypatch.setenv("PROQUINTS_SEPARATOR", value)
        with pytest.raises(ValueError, match="PROQUINTS_SEPARATOR"):
            load_separator()
