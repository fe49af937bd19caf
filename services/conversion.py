"""
Non-raising conversion API and recursive key conversion.
convert() wraps the core functions in a ConversionResult instead of raising for
the known error kinds; convert_keys() normalizes dict keys (e.g. API payloads).
"""
from __future__ import annotations

from functools import partial
from typing import Any, Callable

from schemas.case_options import CaseStyle
from schemas.conversion import ConversionErrorSchema, ConversionResult
from utils.case import KebabOptionsInput, resolve_kebab_options, to_camel_case, to_dot_case, to_kebab_case, to_snake_case
from utils.errors import CaseConversionError
from utils.logger import get_logger

logger = get_logger(__name__)

_CONVERTERS: dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.DOT: to_dot_case,
    CaseStyle.SNAKE: to_snake_case,
}


def get_converter(style: CaseStyle | str, options: KebabOptionsInput = None) -> Callable[[Any], str]:
    """
    Return a single-argument converter for the style.
    Kebab options are resolved once here, so invalid options fail before any text is converted.
    """
    style = CaseStyle(style)
    if style is CaseStyle.KEBAB:
        opts = resolve_kebab_options(options)
        return lambda text: to_kebab_case(text, opts)
    if options is not None:
        raise ValueError(f"options are only supported for {CaseStyle.KEBAB.value} case")
    return _CONVERTERS[style]


def convert(text: Any, style: CaseStyle | str, options: KebabOptionsInput = None) -> ConversionResult:
    """
    Convert text to the given style without raising for invalid input.
    Returns a ConversionResult holding either the value or the typed error.
    Input errors take precedence over option errors, as in to_kebab_case.
    """
    style = CaseStyle(style)
    if style is CaseStyle.KEBAB:
        converter = partial(to_kebab_case, options=options)
    else:
        converter = get_converter(style, options)
    try:
        return ConversionResult(style=style, value=converter(text))
    except CaseConversionError as e:
        logger.debug(f"{style.value} conversion rejected {text!r}: {e}")
        return ConversionResult(
            style=style,
            error=ConversionErrorSchema(kind=e.kind, message=str(e)),
        )


def try_camel_case(text: Any) -> ConversionResult:
    return convert(text, CaseStyle.CAMEL)


def try_kebab_case(text: Any, options: KebabOptionsInput = None) -> ConversionResult:
    return convert(text, CaseStyle.KEBAB, options)


def try_dot_case(text: Any) -> ConversionResult:
    return convert(text, CaseStyle.DOT)


def try_snake_case(text: Any) -> ConversionResult:
    return convert(text, CaseStyle.SNAKE)


def convert_keys(obj: Any, style: CaseStyle | str, options: KebabOptionsInput = None) -> Any:
    """
    Recursively convert dict keys to the given style; lists are walked, other values returned as-is.
    Keys that convert to the same string collide and the later one wins,
    e.g. {"a_b": 1, "a-b": 2} -> {"a_b": 2} for snake.
    """
    converter = get_converter(style, options)

    def _walk(node: Any) -> Any:
        if isinstance(node, dict):
            return {converter(k): _walk(v) for k, v in node.items()}
        if isinstance(node, list):
            return [_walk(x) for x in node]
        return node

    return _walk(obj)
