"""
Options for the case conversions.
Only kebab-case is configurable; the other styles have fixed output.
"""
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LetterCase = Literal["lower", "upper", "title"]


class CaseStyle(str, Enum):
    CAMEL = "camel"
    KEBAB = "kebab"
    DOT = "dot"
    SNAKE = "snake"


class KebabCaseOptions(BaseModel):
    """Separator and letter case applied by to_kebab_case."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    separator: str = Field("-", strict=True, description="Single character placed between words")
    case: LetterCase = Field("lower", description="lower, upper, or title")

    @field_validator("separator")
    @classmethod
    def check_single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("separator must be a single character")
        return v
