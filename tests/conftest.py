import logging

import pytest

from debug import LOGGER_NAME, Debug


@pytest.fixture(autouse=True)
def quiet_debug():
    """Every test starts and ends with all debug components off."""
    dbg = Debug()
    dbg.disable(*dbg.components)
    dbg.toggle_global(True)
    yield dbg
    dbg.disable(*dbg.components)
    dbg.toggle_global(True)


@pytest.fixture
def enigma_log(caplog):
    """caplog wired straight to the ENIGMA logger, which does not propagate."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
