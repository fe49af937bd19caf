from schemas.case_options import CaseStyle, KebabCaseOptions, LetterCase
from schemas.conversion import ConversionErrorSchema, ConversionResult

__all__ = [
    "CaseStyle",
    "KebabCaseOptions",
    "LetterCase",
    "ConversionErrorSchema",
    "ConversionResult",
]
