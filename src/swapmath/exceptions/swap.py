from swapmath.exceptions.evm import EVMRevertError


class InvalidPrice(EVMRevertError):
    """
    Raised when a square root price is zero where a positive price is required.
    """

    def __init__(self, error: str = "InvalidPrice") -> None:
        super().__init__(error=error)


class InvalidLiquidity(EVMRevertError):
    """
    Raised when a next price is requested for a range with no liquidity.
    """

    def __init__(self, error: str = "InvalidLiquidity") -> None:
        super().__init__(error=error)


class InvalidFee(EVMRevertError):
    """
    Raised when the fee is not strictly less than the fee denominator.
    """

    def __init__(self, error: str = "InvalidFee") -> None:
        super().__init__(error=error)


class PriceOverflow(EVMRevertError):
    """
    Raised when the token0 amount removed meets or exceeds the virtual reserves of the range.
    """

    def __init__(self, error: str = "PriceOverflow") -> None:
        super().__init__(error=error)


class NotEnoughLiquidity(EVMRevertError):
    """
    Raised when the token1 amount removed meets or exceeds the virtual reserves of the range.
    """

    def __init__(self, error: str = "NotEnoughLiquidity") -> None:
        super().__init__(error=error)
