import pytest

from sprig.arena import Arena
from sprig.builtin.env_builtin import register
from sprig.interpreter import Interpreter


@pytest.fixture
def arena():
    """A fresh arena, released after the test if the test did not release it."""
    a = Arena()
    yield a
    if not a.released:
        a.release()


@pytest.fixture
def frame(arena):
    """A root frame holding the primitives, allocated from the test's arena."""
    f = arena.frame()
    register(f, arena)
    return f


@pytest.fixture
def interp():
    with Interpreter() as i:
        yield i


@pytest.fixture(autouse=True)
def _clean_sprig_env(monkeypatch):
    # Tests must not inherit settings from the developer's shell
    for var in ("SPRIG_MAX_TOKEN_LENGTH", "SPRIG_MODE", "SPRIG_TRACE"):
        monkeypatch.delenv(var, raising=False)
