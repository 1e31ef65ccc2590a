import random
from pathlib import Path

import pytest

from collext.rules import Rules, load_rules
from collext.shell import Extensions, create_extensions

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The project's own rules.yaml."""
    path = PROJECT_ROOT / "rules.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Rules not found at {path}")
    return path


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so UUID tests are reproducible."""
    return random.Random(20240101)


@pytest.fixture
def ext(rules: Rules, rng: random.Random) -> Extensions:
    return create_extensions(rules=rules, rng=rng)
