# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Signed integers in unary representation.

A numeral is either `Zero`, the successor `Succ(n)` of a numeral `n`, or the
predecessor `Pred(n)` of a numeral `n`. Well-formed numerals never mix `Succ`
and `Pred` along their chain, hence, every integer has exactly one well-formed
representation. The constructors themselves do not enforce well-formedness,
it is a property preserved by the arithmetic operations.

The operands of `Succ` and `Pred` may be arbitrary terms. This allows using
numerals with variables as patterns within inference rules. Everything else in
this module is only defined for *closed* numerals.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

import abc
import enum
import functools
import warnings

from ..core import inference, terms


class NotANumeralError(TypeError):
    pass


class IllFormedNumeralError(Exception):
    pass


class ConversionError(Exception):
    pass


class SignConversionError(ConversionError):
    pass


class ConversionOverflowError(ConversionError, OverflowError):
    pass


@functools.total_ordering
class Numeral(abc.ABC):
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Numeral):
            return NotImplemented
        return compare(self, other) < 0

    def __int__(self) -> int:
        return to_int(self)

    def __repr__(self) -> str:
        constructors: t.List[str] = []
        term: terms.Term = self
        while isinstance(term, (Succ, Pred)):
            constructors.append(type(term).__name__)
            term = term.operand
        inner = "Zero" if isinstance(term, Zero) else repr(term)
        return "".join(f"{name}(" for name in constructors) + inner + (
            ")" * len(constructors)
        )


@d.dataclass(frozen=True, repr=False)
class Zero(Numeral, terms.Value):
    pass


@d.dataclass(frozen=True, repr=False)
class Succ(Numeral, terms.Compound):
    operand: terms.Term

    @property
    def children(self) -> t.Sequence[terms.Term]:
        return (self.operand,)

    def rebuild(self, children: t.Tuple[terms.Term, ...]) -> Succ:
        (operand,) = children
        return Succ(operand)


@d.dataclass(frozen=True, repr=False)
class Pred(Numeral, terms.Compound):
    operand: terms.Term

    @property
    def children(self) -> t.Sequence[terms.Term]:
        return (self.operand,)

    def rebuild(self, children: t.Tuple[terms.Term, ...]) -> Pred:
        (operand,) = children
        return Pred(operand)


ZERO = Zero()


def is_numeral(term: object) -> bool:
    """
    Checks whether `term` is a closed numeral, well-formed or not.
    """
    while isinstance(term, (Succ, Pred)):
        term = term.operand
    return isinstance(term, Zero)


def is_non_negative(term: terms.Term) -> bool:
    while isinstance(term, Succ):
        term = term.operand
    return isinstance(term, Zero)


def is_non_positive(term: terms.Term) -> bool:
    while isinstance(term, Pred):
        term = term.operand
    return isinstance(term, Zero)


def is_well_formed(term: terms.Term) -> bool:
    return is_non_negative(term) or is_non_positive(term)


def check(term: object) -> Numeral:
    """
    Returns `term` if it is a well-formed closed numeral and raises otherwise.
    """
    if not is_numeral(term):
        raise NotANumeralError(f"{term!r} is not a closed numeral")
    assert isinstance(term, Numeral)
    if not is_well_formed(term):
        raise IllFormedNumeralError(
            f"{term!r} mixes successor and predecessor constructors"
        )
    return term


def sign(numeral: Numeral) -> int:
    if isinstance(numeral, Succ):
        return 1
    elif isinstance(numeral, Pred):
        return -1
    elif isinstance(numeral, Zero):
        return 0
    raise NotANumeralError(f"{numeral!r} is not a numeral")


def compare(left: Numeral, right: Numeral) -> int:
    """
    Compares two well-formed numerals structurally by their integer value.

    Returns a negative number, zero, or a positive number if `left` is smaller
    than, equal to, or greater than `right`, respectively.
    """
    left, right = check(left), check(right)
    left_sign, right_sign = sign(left), sign(right)
    while left_sign == right_sign != 0:
        assert isinstance(left, (Succ, Pred)) and isinstance(right, (Succ, Pred))
        left, right = t.cast(Numeral, left.operand), t.cast(Numeral, right.operand)
        left_sign, right_sign = sign(left), sign(right)
    return left_sign - right_sign


def create(value: int) -> Numeral:
    result: Numeral = ZERO
    if value >= 0:
        for _ in range(value):
            result = Succ(result)
    else:
        for _ in range(-value):
            result = Pred(result)
    return result


def plus(numeral: terms.Term, count: int) -> terms.Term:
    """
    Wraps `count` successor constructors around `numeral`.
    """
    for _ in range(count):
        numeral = Succ(numeral)
    return numeral


def minus(numeral: terms.Term, count: int) -> terms.Term:
    """
    Wraps `count` predecessor constructors around `numeral`.
    """
    for _ in range(count):
        numeral = Pred(numeral)
    return numeral


P1 = Succ(ZERO)
P2 = Succ(P1)
P3 = Succ(P2)
P4 = Succ(P3)
P5 = Succ(P4)
P6 = Succ(P5)
P7 = Succ(P6)
P8 = Succ(P7)
P9 = Succ(P8)

N1 = Pred(ZERO)
N2 = Pred(N1)
N3 = Pred(N2)
N4 = Pred(N3)
N5 = Pred(N4)
N6 = Pred(N5)
N7 = Pred(N6)
N8 = Pred(N7)
N9 = Pred(N8)


LITERALS: t.Mapping[str, Numeral] = {
    "Zero": ZERO,
    "P1": P1, "P2": P2, "P3": P3, "P4": P4, "P5": P5,
    "P6": P6, "P7": P7, "P8": P8, "P9": P9,
    "N1": N1, "N2": N2, "N3": N3, "N4": N4, "N5": N5,
    "N6": N6, "N7": N7, "N8": N8, "N9": N9,
}


def literal(name: str) -> Numeral:
    try:
        return LITERALS[name]
    except KeyError:
        raise KeyError(f"unknown numeral literal {name!r}") from None


def to_int(numeral: terms.Term) -> int:
    value = 0
    while True:
        if isinstance(numeral, Succ):
            value += 1
        elif isinstance(numeral, Pred):
            value -= 1
        elif isinstance(numeral, Zero):
            return value
        else:
            raise NotANumeralError(f"{numeral!r} is not a closed numeral")
        numeral = numeral.operand


class IntegerType(enum.Enum):
    I8 = "i8", 8, True
    I16 = "i16", 16, True
    I32 = "i32", 32, True
    I64 = "i64", 64, True
    ISIZE = "isize", 64, True

    U8 = "u8", 8, False
    U16 = "u16", 16, False
    U32 = "u32", 32, False
    U64 = "u64", 64, False
    USIZE = "usize", 64, False

    label: str
    bits: int
    signed: bool

    def __init__(self, label: str, bits: int, signed: bool) -> None:
        self.label = label
        self.bits = bits
        self.signed = signed

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1 if self.signed else self.bits)) - 1

    @classmethod
    def from_label(cls, label: str) -> IntegerType:
        for typ in cls:
            if typ.label == label:
                return typ
        raise ValueError(f"unknown integer type {label!r}")


def convert(numeral: terms.Term, typ: IntegerType) -> int:
    """
    Converts `numeral` into an integer of the given fixed-width type.

    Unsigned types only accept non-negative numerals.
    """
    value = to_int(numeral)
    if not typ.signed and not is_non_negative(numeral):
        raise SignConversionError(
            f"{numeral!r} is not non-negative and cannot be converted to {typ.label}"
        )
    if not typ.minimum <= value <= typ.maximum:
        raise ConversionOverflowError(f"{value} is out of range for {typ.label}")
    return value


class Requirement(enum.Enum):
    NUMERAL = "numeral", is_numeral
    NON_NEGATIVE = "non-negative", is_non_negative
    NON_POSITIVE = "non-positive", is_non_positive

    description: str
    predicate: t.Callable[[terms.Term], bool]

    def __init__(
        self, description: str, predicate: t.Callable[[terms.Term], bool]
    ) -> None:
        self.description = description
        self.predicate = predicate


@d.dataclass(frozen=True)
class NumeralCondition(inference.Condition):
    term: terms.Term
    requirement: Requirement

    @property
    def variables(self) -> t.AbstractSet[terms.Variable]:
        return self.term.variables

    def get_verdict(self, substitution: terms.Substitution) -> inference.Verdict:
        term = self.term.substitute(substitution)
        if not term.is_closed:
            return inference.Verdict.SATISFIABLE
        if self.requirement is not Requirement.NUMERAL and not is_numeral(term):
            # Sign requirements are only imposed on numerals. This hints at a
            # problem with the inference rules themselves.
            warnings.warn(f"sign requirement imposed on non-numeral {term!r}")
            return inference.Verdict.VIOLATED
        if self.requirement.predicate(term):
            return inference.Verdict.SATISFIED
        return inference.Verdict.VIOLATED


def numeral(term: terms.Term) -> NumeralCondition:
    return NumeralCondition(term, Requirement.NUMERAL)


def non_negative(term: terms.Term) -> NumeralCondition:
    return NumeralCondition(term, Requirement.NON_NEGATIVE)


def non_positive(term: terms.Term) -> NumeralCondition:
    return NumeralCondition(term, Requirement.NON_POSITIVE)
