"""
Indicator errors.

Both kinds are caller-input defects raised before any calculation starts.
"""


class IndicatorError(ValueError):
    """Base class for invalid indicator input."""


class ParameterError(IndicatorError):
    """An indicator parameter is outside its allowed domain."""


class InsufficientHistoryError(IndicatorError):
    """The quote history is too short (or unusable) for the indicator.

    When raised for a length check, ``provided``, ``required`` and
    ``recommended`` hold the counts reported in the message.
    """

    def __init__(
        self,
        message: str,
        provided: int | None = None,
        required: int | None = None,
        recommended: int | None = None,
    ):
        super().__init__(message)
        self.provided = provided
        self.required = required
        self.recommended = recommended
