from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from schemas.case_options import CaseStyle
from utils.errors import ErrorKind


class ConversionErrorSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str


class ConversionResult(BaseModel):
    """
    Outcome of a non-raising conversion.
    Exactly one of value / error is set.
    """
    model_config = ConfigDict(frozen=True)

    style: CaseStyle
    value: Optional[str] = None
    error: Optional[ConversionErrorSchema] = None

    @model_validator(mode="after")
    def check_value_xor_error(self) -> "ConversionResult":
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the converted value or raise ValueError carrying the error message."""
        if self.error is not None:
            raise ValueError(f"{self.error.kind.value}: {self.error.message}")
        return self.value  # type: ignore[return-value]
