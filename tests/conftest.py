"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['STITCHCLASS_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    # Only these emit at INFO; everything else logs at DEBUG.
    for logger_name in ['stitchclass.regions.merge', 'stitchclass.cli']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)
