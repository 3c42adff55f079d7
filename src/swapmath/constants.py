__all__ = (
    "MAX_INT128",
    "MAX_INT256",
    "MAX_UINT24",
    "MAX_UINT128",
    "MAX_UINT160",
    "MAX_UINT256",
    "MIN_INT128",
    "MIN_INT256",
    "MIN_UINT24",
    "MIN_UINT128",
    "MIN_UINT160",
    "MIN_UINT256",
)


def _uint_bounds(bits: int) -> tuple[int, int]:
    return 0, (1 << bits) - 1


def _int_bounds(bits: int) -> tuple[int, int]:
    half = 1 << (bits - 1)
    return -half, half - 1


MIN_INT128, MAX_INT128 = _int_bounds(128)
MIN_INT256, MAX_INT256 = _int_bounds(256)

MIN_UINT24, MAX_UINT24 = _uint_bounds(24)
MIN_UINT128, MAX_UINT128 = _uint_bounds(128)
MIN_UINT160, MAX_UINT160 = _uint_bounds(160)
MIN_UINT256, MAX_UINT256 = _uint_bounds(256)
