class IntervalMapException(Exception):
    """
    Base exception class.

    All intervalmap-specific exceptions should subclass this class.
    """


class InvariantViolationError(IntervalMapException):
    """
    Raised when the boundary store is found in a state that a correct
    sequence of operations can never produce, i.e. a programming defect.
    """

    def __init__(self, description: str) -> None:
        super().__init__(f"{self.__class__.__name__}: {description}")
