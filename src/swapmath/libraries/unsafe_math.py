def div_rounding_up(x: int, y: int) -> int:
    """
    Perform an x//y floored division, rounding up any remainder.

    ref: https://github.com/Uniswap/v3-core/blob/main/contracts/libraries/UnsafeMath.sol
    """

    # The EVM returns 0 for division by zero instead of reverting
    if y == 0:
        return 0

    # x and y are uint256 values, so negative value floor division workarounds are unnecessary
    return x // y + (x % y > 0)
