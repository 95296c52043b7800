import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from signedword.core.errors import SignedWordError
from signedword.i256.arith import add, div_down, div_up, mod, mul, sub
from signedword.i256.bits import bit_and, bit_or, shl, shr
from signedword.i256.compare import compare, eq, gt, gte, lt, lte
from signedword.i256.construct import from_int, to_hex, to_int
from signedword.i256.models import MAX_I256, MIN_I256, Ordering, SignedWord
from signedword.i256.sign import abs_value, flip, is_neg, is_positive, is_zero

logger = logging.getLogger(__name__)


class I256Op(str, Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV_DOWN = "div_down"
    DIV_UP = "div_up"
    MOD = "mod"
    COMPARE = "compare"
    EQ = "eq"
    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"
    ABS = "abs"
    FLIP = "flip"
    IS_NEG = "is_neg"
    IS_ZERO = "is_zero"
    IS_POSITIVE = "is_positive"
    SHR = "shr"
    SHL = "shl"
    OR = "or"
    AND = "and"


_BINARY_OPS: dict[I256Op, Callable[[SignedWord, SignedWord], Any]] = {
    I256Op.ADD: add,
    I256Op.SUB: sub,
    I256Op.MUL: mul,
    I256Op.DIV_DOWN: div_down,
    I256Op.DIV_UP: div_up,
    I256Op.MOD: mod,
    I256Op.COMPARE: compare,
    I256Op.EQ: eq,
    I256Op.LT: lt,
    I256Op.LTE: lte,
    I256Op.GT: gt,
    I256Op.GTE: gte,
    I256Op.OR: bit_or,
    I256Op.AND: bit_and,
}
_UNARY_OPS: dict[I256Op, Callable[[SignedWord], Any]] = {
    I256Op.ABS: abs_value,
    I256Op.FLIP: flip,
    I256Op.IS_NEG: is_neg,
    I256Op.IS_ZERO: is_zero,
    I256Op.IS_POSITIVE: is_positive,
}
_SHIFT_OPS: dict[I256Op, Callable[[SignedWord, int], SignedWord]] = {
    I256Op.SHR: shr,
    I256Op.SHL: shl,
}


def is_unary(op: I256Op) -> bool:
    return op in _UNARY_OPS


class OpRecord(BaseModel):
    op: I256Op
    lhs: int = Field(ge=MIN_I256, le=MAX_I256)
    rhs: int | None = Field(default=None, ge=MIN_I256, le=MAX_I256)

    @model_validator(mode="before")
    @classmethod
    def reject_bool_operands(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for name in ("lhs", "rhs"):
                if isinstance(data.get(name), bool):
                    raise ValueError(f"{name}: bool is not allowed")
        return data

    @model_validator(mode="after")
    def validate_arity(self) -> "OpRecord":
        if is_unary(self.op):
            if self.rhs is not None:
                raise ValueError(f"op '{self.op.value}' takes no 'rhs'")
        elif self.rhs is None:
            raise ValueError(f"op '{self.op.value}' requires field 'rhs'")
        return self


class OpResult(BaseModel):
    op: I256Op
    lhs: int
    rhs: int | None = None
    value: int | bool | str | None = None
    bits: str | None = Field(default=None, description="Hex of a word result")
    error: str | None = None


def eval_op(
    op: I256Op, lhs: SignedWord, rhs: SignedWord | int | None = None
) -> SignedWord | bool | Ordering:
    """Apply ``op``; ``rhs`` is a shift amount for shifts, else a word."""
    if op in _UNARY_OPS:
        return _UNARY_OPS[op](lhs)
    if rhs is None:
        raise ValueError(f"op '{op.value}' requires a right operand")
    if op in _SHIFT_OPS:
        if isinstance(rhs, SignedWord):
            rhs = to_int(rhs)
        return _SHIFT_OPS[op](lhs, rhs)
    if not isinstance(rhs, SignedWord):
        rhs = from_int(rhs)
    return _BINARY_OPS[op](lhs, rhs)


def eval_record(record: OpRecord) -> OpResult:
    """Evaluate one record, capturing domain failures on the result."""
    result = OpResult(op=record.op, lhs=record.lhs, rhs=record.rhs)
    try:
        lhs = from_int(record.lhs)
        out = eval_op(record.op, lhs, record.rhs)
    except (SignedWordError, ValueError) as exc:
        logger.debug("%s failed: %s", record.op.value, exc)
        return result.model_copy(
            update={"error": f"{type(exc).__name__}: {exc}"}
        )

    if isinstance(out, SignedWord):
        return result.model_copy(
            update={"value": to_int(out), "bits": to_hex(out)}
        )
    if isinstance(out, Ordering):
        return result.model_copy(update={"value": out.value})
    return result.model_copy(update={"value": out})
