from . import full_math as FullMath
from . import sqrt_price_math as SqrtPriceMath
from . import swap_math as SwapMath
from . import unsafe_math as UnsafeMath

__all__ = (
    "FullMath",
    "SqrtPriceMath",
    "SwapMath",
    "UnsafeMath",
)
