"""
Error taxonomy for case conversion.
Every error carries an ErrorKind so callers can branch on kind; each class also
subclasses the matching builtin (TypeError / ValueError).
"""
from enum import Enum


class ErrorKind(str, Enum):
    TYPE_MISMATCH = "type_mismatch"
    MISSING_VALUE = "missing_value"
    EMPTY_INPUT = "empty_input"
    LEADING_DELIMITER = "leading_delimiter"
    CONSECUTIVE_DELIMITERS = "consecutive_delimiters"
    INVALID_OPTION = "invalid_option"


class CaseConversionError(Exception):
    """Base class for all conversion failures."""
    kind: ErrorKind


class InvalidTypeError(CaseConversionError, TypeError):
    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, message: str = "Invalid input: must be a string"):
        super().__init__(message)


class MissingValueError(CaseConversionError, TypeError):
    kind = ErrorKind.MISSING_VALUE

    def __init__(self, message: str = "Invalid input: cannot be null or undefined"):
        super().__init__(message)


class EmptyInputError(CaseConversionError, ValueError):
    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, message: str = "Invalid input: non-empty string required"):
        super().__init__(message)


class LeadingDelimiterError(CaseConversionError, ValueError):
    kind = ErrorKind.LEADING_DELIMITER

    def __init__(self, message: str = "String cannot start with a leading delimiter"):
        super().__init__(message)


class ConsecutiveDelimitersError(CaseConversionError, ValueError):
    kind = ErrorKind.CONSECUTIVE_DELIMITERS

    def __init__(self, message: str = "String cannot have consecutive delimiters"):
        super().__init__(message)


class InvalidOptionError(CaseConversionError, ValueError):
    kind = ErrorKind.INVALID_OPTION

    def __init__(self, message: str = "Invalid options"):
        super().__init__(message)


class InvalidSeparatorError(InvalidOptionError):
    def __init__(self, message: str = "Invalid options: separator must be a single character"):
        super().__init__(message)


class InvalidCaseOptionError(InvalidOptionError):
    def __init__(self, message: str = "Invalid options: case must be lower, upper, or title"):
        super().__init__(message)
