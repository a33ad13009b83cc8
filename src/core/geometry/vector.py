"""
Vector2D — двумерный вектор над произвольным скаляром

Immutable Pydantic модель: упорядоченная пара (x, y) значений скаляра S.

Структура:
- Аддитивная группа: zero() = (0, 0), -v = покомпонентное отрицание
- Векторное пространство над S: s * (x, y) = (s·x, s·y)
- Inner space, если S его имеет: dot = x1·x2 + y1·y2
- Базис: индексы BasisIndex(axis, индекс базиса S)

Порядок (<, <=, ...) лексикографический по (x, y) и нужен только для
детерминированной сортировки. Геометрического смысла (длина, угол) у
него нет.

Vector2D никогда не конвертируется неявно в Point2D или в tuple:
переход только через from_pair/to_pair или Point2D.from_vector.
"""

import logging
from enum import Enum
from typing import Any, Generic, Iterable, NamedTuple, Optional, TypeVar

from pydantic import BaseModel

from src.core.errors import TransformContractError
from src.core.geometry.coordinates import Coords2
from src.core.geometry.text import parse_pair, show_pair
from src.core.geometry.transformation import Transformation2D
from src.core.math.algebra import additive_zero, decompose, inner
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)

logger = logging.getLogger(__name__)

S = TypeVar("S")


# =============================================================================
# BASIS
# =============================================================================


class Axis(str, Enum):
    """Ось плоскости"""

    X = "x"
    Y = "y"


class BasisIndex(NamedTuple):
    """
    Индекс базисного элемента Vector2D.

    axis выбирает компоненту, inner — индекс базиса скаляра этой
    компоненты (None для вещественных чисел).
    """

    axis: Axis
    inner: Optional["BasisIndex"] = None


# =============================================================================
# VECTOR MODEL
# =============================================================================


class Vector2D(BaseModel, Generic[S]):
    """
    Двумерный вектор (x, y) над скаляром S.

    Конструирование:
        Vector2D.from_pair((3.0, 4.0))
        Vector2D(x=3.0, y=4.0)
        R2(x=3, y=4)            # компоненты приводятся к float
    """

    x: S
    y: S

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    # -------------------------------------------------------------------------
    # Construction / destructuring
    # -------------------------------------------------------------------------

    @classmethod
    def from_pair(cls, pair: tuple[Any, Any]) -> "Vector2D":
        """Построение вектора из пары компонент."""
        x, y = pair
        return cls(x=x, y=y)

    def to_pair(self) -> tuple[Any, Any]:
        """Разбор вектора обратно в пару компонент."""
        return (self.x, self.y)

    @classmethod
    def build(cls, prev: Any, final: Any) -> "Vector2D":
        return cls(x=prev, y=final)

    def coords(self) -> Coords2:
        return Coords2(self.x, self.y)

    # -------------------------------------------------------------------------
    # Additive group
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, scalar_zero: Any = 0.0) -> "Vector2D":
        """
        Нулевой вектор.

        Args:
            scalar_zero: Ноль скалярного типа (для вложенных векторов
                передаётся Vector2D.zero())
        """
        return cls(x=scalar_zero, y=scalar_zero)

    def zero_like(self) -> "Vector2D":
        """Нулевой вектор того же скалярного типа, что и self."""
        return type(self)(x=additive_zero(self.x), y=additive_zero(self.y))

    def add(self, other: "Vector2D") -> "Vector2D":
        return type(self)(x=self.x + other.x, y=self.y + other.y)

    def negate(self) -> "Vector2D":
        return type(self)(x=-self.x, y=-self.y)

    def subtract(self, other: "Vector2D") -> "Vector2D":
        return self.add(other.negate())

    def __add__(self, other: Any) -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Vector2D":
        return self.negate()

    # -------------------------------------------------------------------------
    # Vector space
    # -------------------------------------------------------------------------

    def scale(self, scalar: Any) -> "Vector2D":
        """Покомпонентное умножение на скаляр: s * (x, y) = (s·x, s·y)."""
        return type(self)(x=scalar * self.x, y=scalar * self.y)

    def __mul__(self, scalar: Any) -> "Vector2D":
        if isinstance(scalar, BaseModel):
            return NotImplemented
        return self.scale(scalar)

    def __rmul__(self, scalar: Any) -> "Vector2D":
        if isinstance(scalar, BaseModel):
            return NotImplemented
        return self.scale(scalar)

    def __truediv__(self, scalar: Any) -> "Vector2D":
        if isinstance(scalar, BaseModel):
            return NotImplemented
        return type(self)(x=self.x / scalar, y=self.y / scalar)

    # -------------------------------------------------------------------------
    # Inner space / basis
    # -------------------------------------------------------------------------

    def dot(self, other: "Vector2D") -> Any:
        """
        Скалярное произведение: x1·x2 + y1·y2.

        Raises:
            MissingCapabilityError: Если у скаляра нет inner product
        """
        return inner(self.x, other.x) + inner(self.y, other.y)

    def decompose(self) -> list[tuple[BasisIndex, Any]]:
        """
        Координаты вектора относительно базиса скаляра.

        Для Vector2D[float]:
            [(BasisIndex(Axis.X), x), (BasisIndex(Axis.Y), y)]

        Raises:
            MissingCapabilityError: Если у скаляра нет базиса
        """
        return [(BasisIndex(Axis.X, index), coef) for index, coef in decompose(self.x)] + [
            (BasisIndex(Axis.Y, index), coef) for index, coef in decompose(self.y)
        ]

    @classmethod
    def basis_value(cls, index: BasisIndex) -> "Vector2D":
        """Базисный вектор, соответствующий индексу."""
        if index.inner is None:
            element: Any = 1.0
        else:
            element = Vector2D.basis_value(index.inner)
        zero = additive_zero(element)

        if index.axis is Axis.X:
            return cls(x=element, y=zero)
        return cls(x=zero, y=element)

    @classmethod
    def recompose(cls, terms: Iterable[tuple[BasisIndex, Any]]) -> "Vector2D":
        """Сборка вектора из (индекс, коэффициент): Σ coef · basis_value(index)."""
        result: Optional[Vector2D] = None
        for index, coef in terms:
            term = cls.basis_value(index).scale(coef)
            result = term if result is None else result + term
        return result if result is not None else cls.zero()

    # -------------------------------------------------------------------------
    # Ordering
    # -------------------------------------------------------------------------

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.to_pair() < other.to_pair()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.to_pair() <= other.to_pair()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.to_pair() > other.to_pair()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.to_pair() >= other.to_pair()

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def transform(self, transformation: Transformation2D) -> "Vector2D":
        """
        Применение преобразования через transform engine.

        Raises:
            TransformContractError: Если engine вернул не Vector2D
        """
        result = transformation.apply(self)
        if not isinstance(result, Vector2D):
            logger.debug(
                "Transformation %s returned %s", type(transformation).__name__, type(result).__name__
            )
            raise TransformContractError(
                f"apply() must return Vector2D, got {type(result).__name__}"
            )
        return result

    # -------------------------------------------------------------------------
    # Comparison with tolerance
    # -------------------------------------------------------------------------

    def is_close(
        self,
        other: "Vector2D",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное сравнение с толерантностью (рекурсивно для вложенных)."""
        return all(
            a.is_close(b, rel_tol, abs_tol)
            if isinstance(a, Vector2D)
            else is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self.to_pair(), other.to_pair())
        )

    # -------------------------------------------------------------------------
    # Text form
    # -------------------------------------------------------------------------

    def show(self, precedence: int = 0) -> str:
        """Каноническая форма "x & y" в контексте с приоритетом precedence."""
        return show_pair(self.x, self.y, precedence)

    def __str__(self) -> str:
        return self.show()

    @classmethod
    def parse(cls, text: str) -> Optional["Vector2D"]:
        """
        Парсинг канонической формы.

        Returns:
            Vector2D с float компонентами или None при несовпадении
        """
        pair = parse_pair(text)
        if pair is None:
            return None
        return cls.from_pair(pair)


# Конкретный вектор над double
R2 = Vector2D[float]
