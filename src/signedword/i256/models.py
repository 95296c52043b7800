from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from signedword.core.uword import WORD_BITS, WORD_MAX

SIGN_BIT = 1 << (WORD_BITS - 1)
ALL_ONES = WORD_MAX
# Largest encoding with the sign bit clear, also the largest magnitude any
# constructor accepts.
MAX_I256 = SIGN_BIT - 1
MIN_I256 = -SIGN_BIT


class Ordering(str, Enum):
    EQUAL = "equal"
    LESS_THAN = "less_than"
    GREATER_THAN = "greater_than"


class SignedWord(BaseModel):
    """A 256-bit two's-complement integer stored as one unsigned word.

    Instances are immutable. Constructors and arithmetic keep ``bits`` in
    canonical form; shifts and bitwise ops may store any bit pattern.
    """

    model_config = ConfigDict(frozen=True)

    bits: int = Field(ge=0, le=WORD_MAX, description="Raw unsigned word")

    @field_validator("bits", mode="before")
    @classmethod
    def reject_bool_bits(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("bits: bool is not allowed")
        return value

    def __repr__(self) -> str:
        return f"SignedWord(bits={self.bits:#x})"
