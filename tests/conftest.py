"""
Pytest configuration and shared fixtures for protockit tests.
"""

import pytest

from protockit.core.platform import PlatformKey, clear_platform_cache
from protockit.toolchain.tags import StaticTagSource


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _fresh_platform_cache():
    """Make sure host detection is re-run for tests that patch it."""
    clear_platform_cache()
    yield
    clear_platform_cache()


@pytest.fixture
def linux_x64() -> PlatformKey:
    return PlatformKey("linux", "x64")


@pytest.fixture
def windows_x64() -> PlatformKey:
    return PlatformKey("windows", "x64")


@pytest.fixture
def raw_tags() -> list:
    """Tag list shaped like the protobuf repository's."""
    return [
        "v3.20.1",
        "v3.20.3",
        "v21.12",
        "v22.0-rc1",
        "v22.0-rc3",
        "v22.0",
        "v25.1",
        "v28.3",
        "v28.2",
        "v29.0-rc2",
        "python/v4.25.1",
        "conformance-test-1",
        "vbeta.1",
    ]


@pytest.fixture
def tag_source(raw_tags) -> StaticTagSource:
    return StaticTagSource(raw_tags)
