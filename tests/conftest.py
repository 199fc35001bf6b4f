import logging

import pytest


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


@pytest.fixture
def logging_disabled():
    """Run the test body with every logger silenced."""
    with DisableLogger():
        yield
