"""Pytest configuration and fixtures."""

import pytest

from bitdecoder import LSB_FIRST, MSB_FIRST


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="Skip slow tests (large inputs, exhaustive widths)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests when --fast flag is used."""
    if config.getoption("--fast"):
        skip_slow = pytest.mark.skip(reason="skipped with --fast flag")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


@pytest.fixture(params=[MSB_FIRST, LSB_FIRST], ids=["msb", "lsb"])
def bit_order(request):
    """Run a test once per bit order."""
    return request.param
