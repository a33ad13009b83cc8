"""
Angle — единицы измерения углов

Каноническое внутреннее значение угла — доля полного оборота (turns),
без ограничения знака и величины (нормализация по желанию вызывающего).

Три номинальных представления одной физической величины:
- Turns:   1 оборот   = 1
- Radians: 1 оборот   = TAU (2π)
- Degrees: 1 оборот   = 360

Единственный допустимый способ перехода между единицами — convert_angle
(или Angle.to): Target.from_turns(source.to_turns()).
ЗАПРЕЩЕНО смешивать единицы в арифметике и сравнениях порядка (TypeError).

ИНВАРИАНТЫ:
1. from_turns(to_turns(a)) == a и to_turns(from_turns(x)) == x (до округления)
2. convert(convert(a, B), C) == convert(a, C) (до округления)
3. full_circle() == from_turns(1.0)
"""

import math
from numbers import Real
from typing import Any, ClassVar, Final, TypeVar

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import EPS_ANGLE_TURNS, EPS_FLOAT_COMPARE_REL, is_close

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Полный оборот в радианах
TAU: Final[float] = 2.0 * math.pi

# Полный оборот в градусах
DEGREES_PER_TURN: Final[float] = 360.0

A = TypeVar("A", bound="Angle")


# =============================================================================
# BASE MODEL
# =============================================================================


class Angle(BaseModel):
    """
    Базовый класс единиц измерения углов.

    Конкретная единица задаёт UNITS_PER_TURN — сколько её единиц
    в одном полном обороте. Сам Angle не инстанцируется.
    """

    value: float = Field(..., description="Значение угла в единицах представления")

    model_config = {"frozen": True}

    UNITS_PER_TURN: ClassVar[float]

    def model_post_init(self, context: Any, /) -> None:
        if not hasattr(type(self), "UNITS_PER_TURN"):
            raise TypeError("Angle is abstract; use Turns, Radians or Degrees")

    # -------------------------------------------------------------------------
    # Conversion protocol
    # -------------------------------------------------------------------------

    def to_turns(self) -> float:
        """Доля полного оборота."""
        return self.value / self.UNITS_PER_TURN

    @classmethod
    def from_turns(cls: type[A], turns: float) -> A:
        """Угол в единицах cls из доли полного оборота."""
        return cls(value=turns * cls.UNITS_PER_TURN)

    @classmethod
    def full_circle(cls: type[A]) -> A:
        """Полный оборот в единицах cls."""
        return cls.from_turns(1.0)

    def to(self, target: type[A]) -> A:
        """Конверсия в другую единицу (см. convert_angle)."""
        return convert_angle(self, target)

    # -------------------------------------------------------------------------
    # Same-unit arithmetic
    # -------------------------------------------------------------------------

    def _same_unit(self, other: Any) -> bool:
        return type(other) is type(self)

    def __add__(self, other: Any) -> "Angle":
        if not self._same_unit(other):
            return NotImplemented
        return type(self)(value=self.value + other.value)

    def __sub__(self, other: Any) -> "Angle":
        if not self._same_unit(other):
            return NotImplemented
        return type(self)(value=self.value - other.value)

    def __neg__(self) -> "Angle":
        return type(self)(value=-self.value)

    def __abs__(self) -> "Angle":
        return type(self)(value=abs(self.value))

    def __mul__(self, factor: Any) -> "Angle":
        if not isinstance(factor, Real):
            return NotImplemented
        return type(self)(value=self.value * factor)

    def __rmul__(self, factor: Any) -> "Angle":
        return self.__mul__(factor)

    def __truediv__(self, other: Any) -> Any:
        """Деление на число даёт угол, деление на угол той же единицы — отношение."""
        if self._same_unit(other):
            return self.value / other.value
        if isinstance(other, Real):
            return type(self)(value=self.value / other)
        return NotImplemented

    def __float__(self) -> float:
        return self.value

    # -------------------------------------------------------------------------
    # Same-unit ordering
    # -------------------------------------------------------------------------

    def __lt__(self, other: Any) -> bool:
        if not self._same_unit(other):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if not self._same_unit(other):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if not self._same_unit(other):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if not self._same_unit(other):
            return NotImplemented
        return self.value >= other.value

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def radians(self) -> float:
        return self.to_turns() * TAU

    def sin(self) -> float:
        return math.sin(self.radians())

    def cos(self) -> float:
        return math.cos(self.radians())

    def tan(self) -> float:
        return math.tan(self.radians())

    def normalized(self: A) -> A:
        """
        Приведение к диапазону [0, full_circle).

        Остаток берётся в собственных единицах, поэтому целые градусы
        остаются целыми: Degrees(370) -> Degrees(10).
        """
        value = self.value % self.UNITS_PER_TURN
        # Для малых отрицательных значений float % округляется до UNITS_PER_TURN
        if value == self.UNITS_PER_TURN:
            value = 0.0
        return type(self)(value=value)

    def is_close(
        self,
        other: "Angle",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_ANGLE_TURNS,
    ) -> bool:
        """Сравнение с толерантностью через обороты; единицы могут различаться."""
        return is_close(self.to_turns(), other.to_turns(), rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# UNITS
# =============================================================================


class Turns(Angle):
    """Угол как доля полного оборота: 1/3 = TAU/3 радиан = 120 градусов."""

    UNITS_PER_TURN: ClassVar[float] = 1.0

    def to_turns(self) -> float:
        return self.value

    @classmethod
    def from_turns(cls, turns: float) -> "Turns":
        return cls(value=turns)


class Radians(Angle):
    """Угол в радианах: TAU радиан = 1 полный оборот."""

    UNITS_PER_TURN: ClassVar[float] = TAU

    def radians(self) -> float:
        return self.value


class Degrees(Angle):
    """Угол в градусах: 360 градусов = 1 полный оборот."""

    UNITS_PER_TURN: ClassVar[float] = DEGREES_PER_TURN


# =============================================================================
# CONVERSION
# =============================================================================


def convert_angle(angle: Angle, target: type[A]) -> A:
    """
    Конверсия угла между единицами через каноническое представление.

    Args:
        angle: Угол в любой единице
        target: Целевой класс единицы (Turns, Radians, Degrees)

    Returns:
        target.from_turns(angle.to_turns())

    Examples:
        >>> convert_angle(Degrees(value=180.0), Radians).value
        3.141592653589793
        >>> convert_angle(Degrees(value=360.0), Turns).value
        1.0
    """
    return target.from_turns(angle.to_turns())
