"""
PyTest Configuration and Fixtures
"""

import pytest

from math_calculator.config import get_settings
from math_calculator.registry import build_registry


@pytest.fixture
def registry():
    """Fresh registry, independent from the module-level default"""
    return build_registry()


@pytest.fixture
def settings_env(monkeypatch):
    """Override settings through MATH_CALC_* variables and reset the cached instance"""

    def _apply(**overrides):
        for key, value in overrides.items():
            monkeypatch.setenv(f"MATH_CALC_{key}", str(value))
        get_settings.cache_clear()
        return get_settings()

    yield _apply
    get_settings.cache_clear()


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "api: mark test as API test")
    config.addinivalue_line("markers", "cli: mark test as CLI test")
    config.addinivalue_line("markers", "performance: mark test as performance test")
