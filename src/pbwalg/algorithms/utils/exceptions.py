"""
Custom exceptions for the pbwalg package.
"""


class PBWError(Exception):
    """Base exception for pbwalg errors.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class InconsistentRelations(PBWError):
    """Raised when the relations of an algebra fail the construction check.

    Parameters
    ----------
    message : str
        The error message.
    indices : tuple of int
        Offending generator pair ``(i, j)`` or triple ``(i, j, k)``.
    """

    def __init__(self, message: str, indices: tuple = ()):
        super().__init__(message)
        self.indices = tuple(indices)


class MismatchedAlgebra(PBWError, TypeError):
    """Raised when operands belong to different algebra instances.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class SidednessMismatch(PBWError, ValueError):
    """Raised when ideals of incompatible sidedness are combined.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class UnsupportedRingOperation(PBWError, ArithmeticError):
    """Raised when the coefficient ring lacks a required operation.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class InvalidIndex(PBWError, IndexError):
    """Raised for out-of-range generator or generating-set indices.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)


class CompletionLimitError(PBWError):
    """Raised when a caller-imposed completion budget is exhausted.

    Parameters
    ----------
    message : str
        The error message.
    """

    def __init__(self, message: str):
        super().__init__(message)
