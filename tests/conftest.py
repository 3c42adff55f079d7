import logging

import pytest

from swapmath.libraries import sqrt_price_math
from swapmath.logging import logger

CACHED_FUNCTIONS = (
    sqrt_price_math.get_amount0_delta,
    sqrt_price_math.get_amount1_delta,
    sqrt_price_math.get_next_sqrt_price_from_amount0_rounding_up,
    sqrt_price_math.get_next_sqrt_price_from_amount1_rounding_down,
    sqrt_price_math.get_next_sqrt_price_from_input,
    sqrt_price_math.get_next_sqrt_price_from_output,
)


@pytest.fixture(autouse=True)
def _initialize_and_reset_after_each_test():
    """
    Before each test, clear the memoized library results
    """
    for func in CACHED_FUNCTIONS:
        func.cache_clear()


@pytest.fixture(scope="session", autouse=True)
def _set_swapmath_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)
