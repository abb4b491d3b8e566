import pytest

from protoscrape.cache import clear_cache


@pytest.fixture(autouse=True)
def fresh_cache():
    """Reflection results are process-wide; isolate each test."""
    clear_cache()
    yield
    clear_cache()
