"""
Collection of module errors.

This module defines the exception hierarchy used throughout the binning package.
All custom exceptions inherit from the base BinningError class, which itself
inherits from the standard Exception class.
"""


class BinningError(Exception):
    """
    Base exception class for all binning errors.

    This is the root exception from which all other binning-specific
    exceptions inherit.
    """
    def __init__(self, msg: str | None = None) -> None:
        """
        Initialize a new BinningError.

        Args:
            msg: The error message. Defaults to None.
        """
        # no need to store msg as an attribute since Exception already does this
        super().__init__(msg)


class BinningConfigError(BinningError):
    """Exception raised for a malformed binning scheme configuration."""
    pass


class BinningValueError(BinningError):
    """
    Exception raised for errors in the value of parameters.

    This exception is used when a function receives a parameter with an
    inappropriate value (e.g., an unknown coordinate format or scheme name).
    """
    pass


class BinningRangeError(BinningError):
    """
    Exception raised when an interval lies outside the positions a scheme
    can bin.

    Attributes:
        start (int): Start of the offending interval.
        stop (int): Stop of the offending interval.
        max_position (int): The largest position of the scheme.
    """
    def __init__(self, start: int, stop: int, max_position: int) -> None:
        self.start = start
        self.stop = stop
        self.max_position = max_position
        super().__init__(
            f'interval out of range: {start}-{stop} '
            f'(maximum position is {max_position})'
        )

    def __reduce__(self):
        return self.__class__, (self.start, self.stop, self.max_position)


class BinningInvalidBinError(BinningError):
    """
    Exception raised for a bin number that does not exist in a scheme.

    Attributes:
        bin (int): The offending bin number.
        max_bin (int): The largest bin number of the scheme.
        level (int | None): The level whose last bin `bin` lies past, if
            `bin` is within 0:max_bin but unused.
    """
    def __init__(self, bin: int, max_bin: int, level: int | None = None) -> None:
        self.bin = bin
        self.max_bin = max_bin
        self.level = level
        if level is None:
            msg = f'not a valid bin number: {bin} (must be >= 0 and <= {max_bin})'
        else:
            msg = f'not a valid bin number: {bin} (past the last bin of level {level})'
        super().__init__(msg)

    def __reduce__(self):
        return self.__class__, (self.bin, self.max_bin, self.level)
