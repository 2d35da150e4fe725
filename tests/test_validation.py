"""Tests for ikonik.validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from ikonik.errors import InvalidDocument
from ikonik.models import SourceFile
from ikonik.validation import DocumentValidator


def _source(content: str) -> SourceFile:
    return SourceFile(relative_path="a/b.svg", absolute_path=Path("/src/a/b.svg"), content=content)


def test_validator_accepts_svg_markup() -> None:
    source = _source('<?xml version="1.0"?><svg xmlns="http://www.w3.org/2000/svg"></svg>')

    assert DocumentValidator().validate(source) is source


def test_validator_rejects_documents_without_root_marker() -> None:
    with pytest.raises(InvalidDocument) as excinfo:
        DocumentValidator().validate(_source("<html><body /></html>"))

    assert excinfo.value.relative_path == "a/b.svg"
