import random

import pytest

from tagc.template import StatementRegistry, create_default_registry


@pytest.fixture
def registry() -> StatementRegistry:
    """Реестр со встроенными операторами (lorem, comment)."""
    return create_default_registry()


@pytest.fixture
def rng() -> random.Random:
    """Детерминированный источник случайности."""
    return random.Random(1234)
