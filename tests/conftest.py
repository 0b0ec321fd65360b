"""Configure test environment for importing the project package."""
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC = REPO_ROOT / "src"

if SRC.exists() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def quadratic():
    """f(x) = x² - 2, root √2."""

    def f(x):
        return x**2 - 2.0

    return f


@pytest.fixture
def quadratic_prime():
    def g(x):
        return 2.0 * x

    return g


@pytest.fixture
def counting():
    """Wrap a function so the number of evaluations can be checked."""

    class Counter:
        def __init__(self, f):
            self.f = f
            self.calls = 0

        def __call__(self, x):
            self.calls += 1
            return self.f(x)

    return Counter
