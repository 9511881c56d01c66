"""Shared configurations for pytest.

See https://docs.pytest.org/en/6.2.x/fixture.html.
"""

from typing import Iterator

import pytest

from functional_expressions.synthesis.synthesizer import (
    CallableSynthesizer,
    set_default_synthesizer,
)


@pytest.fixture(name="synthesizer")
def fixture_synthesizer() -> CallableSynthesizer:
    """A fresh synthesizer whose live units belong to one test only."""
    return CallableSynthesizer()


@pytest.fixture(autouse=True)
def reset_default_synthesizer() -> Iterator[None]:
    """Undo any default synthesizer installed by a test."""
    yield
    set_default_synthesizer(None)
