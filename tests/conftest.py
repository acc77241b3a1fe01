"""Global pytest fixtures for order placing."""

from __future__ import annotations

import pytest

from tests.fakes import FakeCollaborators


@pytest.fixture
def collaborators() -> FakeCollaborators:
    """Collaborators that know W1234 and G123 and accept every address."""
    return FakeCollaborators()
