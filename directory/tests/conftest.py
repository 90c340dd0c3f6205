import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def _reset_throttles():
    # DRF throttles count requests in the default cache
    cache.clear()
    yield
    cache.clear()
