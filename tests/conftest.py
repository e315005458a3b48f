import logging

import pytest


@pytest.fixture()
def debug_log(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture everything the hypermath logger emits, debug included."""
    caplog.set_level(logging.DEBUG, logger="hypermath")
    return caplog
