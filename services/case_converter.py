"""
Fluent wrapper over the conversion core.
Each conversion replaces the held value and returns the same instance, so calls chain:
    CaseConverter("user name").camel_case().kebab_case().value()  # "username"
A failing step raises and leaves the held value as it was.
"""
from __future__ import annotations

from schemas.case_options import CaseStyle
from utils.case import KebabOptionsInput, to_camel_case, to_dot_case, to_kebab_case, to_snake_case
from utils.logger import get_logger

logger = get_logger(__name__)


class CaseConverter:
    def __init__(self, value: str):
        # Validation happens on the first conversion, not here.
        self._value = value

    def camel_case(self) -> CaseConverter:
        return self._apply(CaseStyle.CAMEL, to_camel_case(self._value))

    def kebab_case(self, options: KebabOptionsInput = None) -> CaseConverter:
        return self._apply(CaseStyle.KEBAB, to_kebab_case(self._value, options))

    def dot_case(self) -> CaseConverter:
        return self._apply(CaseStyle.DOT, to_dot_case(self._value))

    def snake_case(self) -> CaseConverter:
        return self._apply(CaseStyle.SNAKE, to_snake_case(self._value))

    def convert(self, style: CaseStyle | str, options: KebabOptionsInput = None) -> CaseConverter:
        """Dispatch by style name; options are only accepted for kebab."""
        style = CaseStyle(style)
        if style is CaseStyle.KEBAB:
            return self.kebab_case(options)
        if options is not None:
            raise ValueError(f"options are only supported for {CaseStyle.KEBAB.value} case")
        if style is CaseStyle.CAMEL:
            return self.camel_case()
        if style is CaseStyle.DOT:
            return self.dot_case()
        return self.snake_case()

    def value(self) -> str:
        return self._value

    def _apply(self, style: CaseStyle, result: str) -> CaseConverter:
        logger.debug(f"{style.value}: {self._value!r} -> {result!r}")
        self._value = result
        return self

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"CaseConverter({self._value!r})"
