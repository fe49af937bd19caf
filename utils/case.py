"""
Case conversion core: camelCase, kebab-case, dot.case and snake_case.
Every function validates its input the same way before transforming it; the
chaining wrapper and the result-type API both delegate here.
"""
import re
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from schemas.case_options import KebabCaseOptions
from utils.errors import (
    ConsecutiveDelimitersError,
    EmptyInputError,
    InvalidCaseOptionError,
    InvalidOptionError,
    InvalidSeparatorError,
    InvalidTypeError,
    LeadingDelimiterError,
    MissingValueError,
)

# Whitespace (BOM included), underscore, hyphen
WORD_DELIMITERS = r"\s\ufeff_\-"
# Kebab-case also re-delimits dotted input
KEBAB_DELIMITERS = r"\s\ufeff_.\-"

_CAMEL_CASE_RE = re.compile(r"[a-z][a-zA-Z]*")
_TITLE_WORD_START_RE = re.compile(r"\b\w", re.ASCII)

KebabOptionsInput = Union[KebabCaseOptions, Mapping[str, Any], None]


def _validate(text: Any, delimiters: str) -> str:
    if text is None:
        raise MissingValueError()
    if not isinstance(text, str):
        raise InvalidTypeError(f"Invalid input: must be a string, got {type(text).__name__}")
    # str.strip() keeps the BOM; treat it as whitespace
    if text.replace("\ufeff", " ").strip() == "":
        raise EmptyInputError()
    if re.match(f"[{delimiters}]", text):
        raise LeadingDelimiterError()
    if re.search(f"[{delimiters}]{{2,}}", text):
        raise ConsecutiveDelimitersError()
    return text


def _collapse(text: str, delimiters: str, replacement: str) -> str:
    # lambda keeps the replacement literal (no backslash-group expansion)
    return re.sub(f"[{delimiters}]+", lambda _: replacement, text)


def resolve_kebab_options(options: KebabOptionsInput = None) -> KebabCaseOptions:
    """
    Turn None, a mapping, or a KebabCaseOptions into a validated KebabCaseOptions.
    Pydantic validation errors are translated into InvalidOptionError subclasses.
    """
    if options is None:
        return KebabCaseOptions()
    if isinstance(options, KebabCaseOptions):
        return options
    if not isinstance(options, Mapping):
        raise InvalidOptionError(f"Invalid options: expected a mapping, got {type(options).__name__}")
    try:
        return KebabCaseOptions.model_validate(dict(options))
    except ValidationError as e:
        first = e.errors()[0]
        field = first["loc"][0] if first["loc"] else None
        if field == "separator":
            raise InvalidSeparatorError() from e
        if field == "case":
            raise InvalidCaseOptionError() from e
        raise InvalidOptionError(f"Invalid options: {first['msg']} ({field})") from e


def to_camel_case(text: str) -> str:
    """
    Convert to camelCase: first word lowercase, later words capitalized.
    Input already matching [a-z][a-zA-Z]* is returned unchanged.

    >>> to_camel_case("SCREEN_NAME")
    'screenName'
    """
    text = _validate(text, WORD_DELIMITERS)
    if _CAMEL_CASE_RE.fullmatch(text):
        return text
    words = _collapse(text, WORD_DELIMITERS, " ").split(" ")
    parts = []
    for index, word in enumerate(words):
        lower = word.lower()
        parts.append(lower if index == 0 else lower[:1].upper() + lower[1:])
    return "".join(parts)


def to_kebab_case(text: str, options: KebabOptionsInput = None) -> str:
    """
    Convert to kebab-case (or a custom separator / letter case).

    Args:
        text: Input string; whitespace, underscore, dot and hyphen are delimiters
        options: KebabCaseOptions, a dict with separator/case keys, or None

    Returns:
        Converted string, e.g. "hello world" -> "hello-world"
    """
    text = _validate(text, KEBAB_DELIMITERS)
    opts = resolve_kebab_options(options)
    result = _collapse(text, KEBAB_DELIMITERS, opts.separator)
    if opts.case == "upper":
        return result.upper()
    if opts.case == "title":
        return _TITLE_WORD_START_RE.sub(lambda m: m.group(0).upper(), result)
    return result.lower()


def to_dot_case(text: str) -> str:
    """Convert to dot.case (lowercase, dots between words)."""
    text = _validate(text, WORD_DELIMITERS)
    return _collapse(text, WORD_DELIMITERS, ".").lower()


def to_snake_case(text: str) -> str:
    """Convert to snake_case (lowercase, underscores between words)."""
    text = _validate(text, WORD_DELIMITERS)
    return _collapse(text, WORD_DELIMITERS, "_").lower()
