import math
import operator
from collections.abc import Callable
from functools import total_ordering
from numbers import Real
from typing import Any, ClassVar, Self

from byteunit.errors import InvalidFormat

KB = 10
MB = 20
GB = 30
TB = 40


def _number(value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        msg = f'expected a number of bytes, got {type(value).__name__}'
        raise TypeError(msg)

    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _operand(value) -> float | None:
    if isinstance(value, Unit):
        return value.as_bytes()

    try:
        return _number(value)
    except TypeError:
        return None


def _scale(value: float, exponent: int) -> float:
    return _number(value) * (1 << exponent)


def _truediv(lhs: float, rhs: float) -> float:
    try:
        return lhs / rhs
    except ZeroDivisionError:
        if lhs == 0 or math.isnan(lhs):
            return math.nan

        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)


@total_ordering
class Unit:
    """
    Quantity of digital storage, stored as a float number of bytes.

    Parameters
    ----------
    value : float | str, optional
        Byte count, or a string such as ``'10GB'`` which is parsed with
        `Unit.parse`.

    Examples
    --------
    >>> Unit.parse('1,5KB').as_bytes()
    1536.0
    >>> str(Unit.from_gigabytes(-10))
    '-10.00GB'
    """

    __slots__ = ('_bytes',)

    SUFFIXES: ClassVar[dict[str, int]] = {
        'B': 0,
        'KB': KB,
        'MB': MB,
        'GB': GB,
        'TB': TB,
    }
    TIERS: ClassVar[tuple[tuple[str, int], ...]] = (
        ('TB', TB),
        ('GB', GB),
        ('MB', MB),
        ('KB', KB),
    )

    def __init__(self, value: float | str = 0.0) -> None:
        if isinstance(value, str):
            value = self.parse(value).as_bytes()

        self._bytes = _number(value)

    def as_bytes(self) -> float:
        return self._bytes

    @classmethod
    def from_bytes(cls, value: float) -> Self:
        return cls(value)

    @classmethod
    def from_kilobytes(cls, value: float) -> Self:
        return cls(_scale(value, KB))

    @classmethod
    def from_megabytes(cls, value: float) -> Self:
        return cls(_scale(value, MB))

    @classmethod
    def from_gigabytes(cls, value: float) -> Self:
        return cls(_scale(value, GB))

    @classmethod
    def from_terabytes(cls, value: float) -> Self:
        return cls(_scale(value, TB))

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse a number followed by one of ``B``, ``KB``, ``MB``, ``GB``, ``TB``.

        The unit is case-sensitive. Whitespace around the number and the unit is
        ignored and a decimal comma is read as a decimal point.

        Raises
        ------
        InvalidFormat
        """
        index = next(
            (i for i in range(len(text) - 1, -1, -1) if text[i].isnumeric()),
            None,
        )
        if index is None:
            raise InvalidFormat(text)

        number = text[: index + 1].strip().replace(',', '.')
        suffix = text[index + 1 :].strip()

        if '_' in number or not number.isascii():
            raise InvalidFormat(text, f'could not convert string to float: {number!r}')

        try:
            value = float(number)
        except ValueError as e:
            raise InvalidFormat(text, str(e)) from e

        try:
            exponent = cls.SUFFIXES[suffix]
        except KeyError:
            raise InvalidFormat(text) from None

        return cls(_scale(value, exponent))

    def to_display_string(self) -> str:
        size = abs(self._bytes)

        for suffix, exponent in self.TIERS:
            if size >= 1 << exponent:
                return f'{self._bytes / (1 << exponent):.2f}{suffix}'

        return f'{self._bytes:z.0f}B'

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._bytes!r})'

    def __float__(self) -> float:
        return self._bytes

    def __bool__(self) -> bool:
        return self._bytes != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented

        return self._bytes == other._bytes

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented

        return self._bytes < other._bytes

    # mutable through the in-place operators
    __hash__ = None  # type: ignore[assignment]

    def _binary(self, other, op: Callable[[float, float], float], *, reflected=False):
        if (value := _operand(other)) is None:
            return NotImplemented

        lhs, rhs = (value, self._bytes) if reflected else (self._bytes, value)
        return self.__class__(op(lhs, rhs))

    def _inplace(self, other, op: Callable[[float, float], float]):
        if (value := _operand(other)) is None:
            return NotImplemented

        self._bytes = op(self._bytes, value)
        return self

    def __add__(self, other: 'Unit | float') -> Self:
        return self._binary(other, operator.add)

    def __radd__(self, other: float) -> Self:
        return self._binary(other, operator.add, reflected=True)

    def __iadd__(self, other: 'Unit | float') -> Self:
        return self._inplace(other, operator.add)

    def __sub__(self, other: 'Unit | float') -> Self:
        return self._binary(other, operator.sub)

    def __rsub__(self, other: float) -> Self:
        return self._binary(other, operator.sub, reflected=True)

    def __isub__(self, other: 'Unit | float') -> Self:
        return self._inplace(other, operator.sub)

    def __mul__(self, other: 'Unit | float') -> Self:
        return self._binary(other, operator.mul)

    def __rmul__(self, other: float) -> Self:
        return self._binary(other, operator.mul, reflected=True)

    def __imul__(self, other: 'Unit | float') -> Self:
        return self._inplace(other, operator.mul)

    def __truediv__(self, other: 'Unit | float') -> Self:
        return self._binary(other, _truediv)

    def __rtruediv__(self, other: float) -> Self:
        return self._binary(other, _truediv, reflected=True)

    def __itruediv__(self, other: 'Unit | float') -> Self:
        return self._inplace(other, _truediv)

    def add(self, other: 'Unit | float') -> Self:
        return self + other

    def subtract(self, other: 'Unit | float') -> Self:
        return self - other

    def multiply(self, other: 'Unit | float') -> Self:
        return self * other

    def divide(self, other: 'Unit | float') -> Self:
        return self / other

    def iadd(self, other: 'Unit | float') -> Self:
        self += other
        return self

    def isubtract(self, other: 'Unit | float') -> Self:
        self -= other
        return self

    def imultiply(self, other: 'Unit | float') -> Self:
        self *= other
        return self

    def idivide(self, other: 'Unit | float') -> Self:
        self /= other
        return self

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any):
        from byteunit.serde import unit_schema  # noqa: PLC0415

        return unit_schema(cls)

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any):
        from byteunit.serde import unit_json_schema  # noqa: PLC0415

        return unit_json_schema()
