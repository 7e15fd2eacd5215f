"""Errors raised by the EMI engine.

Both concrete errors subclass ValueError so callers that only care about bad
input can catch that.
"""


class LoanCalculationError(ValueError):
    """Base class for every error the engine raises."""


class InvalidArgument(LoanCalculationError):
    """An input is outside its documented domain."""


class UnamortizableLoan(LoanCalculationError):
    """The payment never pays the loan down in finite time."""
