"""Shared utilities: case conversion core, error taxonomy, logging."""
from utils.case import (
    resolve_kebab_options,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
    to_snake_case,
)
from utils.errors import (
    CaseConversionError,
    ConsecutiveDelimitersError,
    EmptyInputError,
    ErrorKind,
    InvalidCaseOptionError,
    InvalidOptionError,
    InvalidSeparatorError,
    InvalidTypeError,
    LeadingDelimiterError,
    MissingValueError,
)
from utils.logger import get_logger

__all__ = [
    "to_camel_case",
    "to_kebab_case",
    "to_dot_case",
    "to_snake_case",
    "resolve_kebab_options",
    "CaseConversionError",
    "ErrorKind",
    "InvalidTypeError",
    "MissingValueError",
    "EmptyInputError",
    "LeadingDelimiterError",
    "ConsecutiveDelimitersError",
    "InvalidOptionError",
    "InvalidSeparatorError",
    "InvalidCaseOptionError",
    "get_logger",
]
