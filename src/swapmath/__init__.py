from .config import settings
from .logging import logger
from .version import __version__

# isort: split

from . import exceptions, libraries
from .libraries.full_math import muldiv, muldiv_rounding_up
from .libraries.sqrt_price_math import (
    get_amount0_delta,
    get_amount1_delta,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)
from .libraries.swap_math import compute_swap_step
from .types import ExactInput, ExactOutput, Rounding, SwapStepResult

__all__ = (
    "ExactInput",
    "ExactOutput",
    "Rounding",
    "SwapStepResult",
    "__version__",
    "compute_swap_step",
    "exceptions",
    "get_amount0_delta",
    "get_amount1_delta",
    "get_next_sqrt_price_from_input",
    "get_next_sqrt_price_from_output",
    "libraries",
    "logger",
    "muldiv",
    "muldiv_rounding_up",
    "settings",
)
