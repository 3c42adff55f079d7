Q96_RESOLUTION = 96
Q96 = 2**Q96_RESOLUTION
Q128 = 2**128

# The fee denominator, fees are expressed in hundredths of a basis point
MAX_SWAP_FEE = 1_000_000

# Bounds of the sqrt price reachable by a pool, equal to get_sqrt_ratio_at_tick(MIN_TICK) and
# get_sqrt_ratio_at_tick(MAX_TICK). Enforced by the pool, not by the swap step.
MIN_TICK = -887272
MAX_TICK = -MIN_TICK
MIN_SQRT_RATIO = 4295128739
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342
