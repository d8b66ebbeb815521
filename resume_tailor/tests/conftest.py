from __future__ import annotations

import pytest
from loguru import logger

from resume_tailor.logger import PACKAGE_NAME


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    # CLI runs install sinks bound to pytest's captured streams.
    logger.remove()
    logger.configure(extra={})
    logger.disable(PACKAGE_NAME)
