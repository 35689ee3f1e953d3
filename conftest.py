"""
pytest configuration for admin-core.

pytest-django loads ``test_settings`` (see ``pyproject.toml``).
"""

import os

import pytest

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'test_settings')


@pytest.fixture(autouse=True)
def clear_cache():
    """The module sync throttle lives in the cache; start every test without it."""
    from django.core.cache import cache

    cache.clear()
    yield
    cache.clear()
