import logging

import pytest
from click.testing import CliRunner


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drops handlers the CLI attaches to streams owned by the runner."""
    yield
    logger = logging.getLogger("html_analyzer")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
