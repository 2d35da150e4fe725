from __future__ import annotations

from pathlib import Path

import pytest

from ikonik.adapters import IdentityFormatter
from ikonik.orchestrator import Orchestrator
from tests._fixtures.doubles import FakeOptimizer, FakeTransformer, RecordingReporter
from tests._fixtures.source_builder import SourceBuilder


@pytest.fixture
def source_builder(tmp_path: Path) -> SourceBuilder:
    """Provide a source tree builder rooted at the pytest tmp_path."""
    return SourceBuilder(tmp_path)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def orchestrator(reporter: RecordingReporter) -> Orchestrator:
    """Orchestrator wired to in-process adapters and a recording reporter."""
    return Orchestrator(
        optimizer=FakeOptimizer(),
        transformer=FakeTransformer(),
        formatter=IdentityFormatter(),
        reporter=reporter,
    )
