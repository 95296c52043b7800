from signedword.i256.models import Ordering, SignedWord
from signedword.i256.sign import abs_value, is_positive


def compare(a: SignedWord, b: SignedWord) -> Ordering:
    if a.bits == b.bits:
        return Ordering.EQUAL

    a_pos = is_positive(a)
    b_pos = is_positive(b)
    if a_pos and b_pos:
        return Ordering.GREATER_THAN if a.bits > b.bits else Ordering.LESS_THAN
    if a_pos:
        return Ordering.GREATER_THAN
    if b_pos:
        return Ordering.LESS_THAN

    # Both negative: the larger magnitude is the smaller value.
    if abs_value(a).bits > abs_value(b).bits:
        return Ordering.LESS_THAN
    return Ordering.GREATER_THAN


def eq(a: SignedWord, b: SignedWord) -> bool:
    return compare(a, b) == Ordering.EQUAL


def lt(a: SignedWord, b: SignedWord) -> bool:
    return compare(a, b) == Ordering.LESS_THAN


def lte(a: SignedWord, b: SignedWord) -> bool:
    return compare(a, b) != Ordering.GREATER_THAN


def gt(a: SignedWord, b: SignedWord) -> bool:
    return compare(a, b) == Ordering.GREATER_THAN


def gte(a: SignedWord, b: SignedWord) -> bool:
    return compare(a, b) != Ordering.LESS_THAN
