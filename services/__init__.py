from services.case_converter import CaseConverter
from services.conversion import (
    convert,
    convert_keys,
    get_converter,
    try_camel_case,
    try_dot_case,
    try_kebab_case,
    try_snake_case,
)

__all__ = [
    "CaseConverter",
    "convert",
    "convert_keys",
    "get_converter",
    "try_camel_case",
    "try_kebab_case",
    "try_dot_case",
    "try_snake_case",
]
