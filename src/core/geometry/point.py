"""
Point2D — точка аффинной плоскости

Immutable Pydantic модель поверх Vector2D[float] (вектор от начала координат).

Точки образуют аффинное пространство, а не векторное:
- point - point  -> Vector2D (смещение)
- point + vector -> Point2D  (перенос)
- point - vector -> Point2D

ЗАПРЕЩЕНО (TypeError): point + point, -point, scalar * point.
Нулевой точки нет; origin() — выделенная точка, а не нейтральный элемент.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.geometry.coordinates import Coords2
from src.core.geometry.transformation import Transformation2D
from src.core.geometry.vector import R2, Vector2D
from src.core.math.numerical_safeguards import EPS_FLOAT_COMPARE_ABS, EPS_FLOAT_COMPARE_REL


class Point2D(BaseModel):
    """
    Точка плоскости.

    Конструирование:
        Point2D.from_pair((1.0, 2.0))
        Point2D.origin() + Vector2D.from_pair((1.0, 2.0))
    """

    vector: R2 = Field(..., description="Смещение точки от начала координат")

    model_config = {"frozen": True}

    @field_validator("vector", mode="before")
    @classmethod
    def coerce_to_r2(cls, v: Any) -> Any:
        """Любой Vector2D приводится к Vector2D[float]."""
        if isinstance(v, Vector2D) and not isinstance(v, R2):
            return R2(x=v.x, y=v.y)
        return v

    # -------------------------------------------------------------------------
    # Construction / destructuring
    # -------------------------------------------------------------------------

    @classmethod
    def from_pair(cls, pair: tuple[float, float]) -> "Point2D":
        return cls(vector=R2.from_pair(pair))

    def to_pair(self) -> tuple[float, float]:
        return self.vector.to_pair()

    @classmethod
    def origin(cls) -> "Point2D":
        return cls(vector=R2.zero())

    @classmethod
    def from_vector(cls, vector: Vector2D) -> "Point2D":
        """Точка, в которую ведёт vector из начала координат: origin + vector."""
        return cls(vector=vector)

    def to_vector(self) -> Vector2D:
        """Вектор от начала координат до точки: self - origin."""
        return self.vector

    @classmethod
    def build(cls, prev: float, final: float) -> "Point2D":
        return cls.from_pair((prev, final))

    def coords(self) -> Coords2:
        return self.vector.coords()

    # -------------------------------------------------------------------------
    # Affine space
    # -------------------------------------------------------------------------

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Point2D):
            return self.vector - other.vector
        if isinstance(other, Vector2D):
            return Point2D(vector=self.vector - other)
        return NotImplemented

    def __add__(self, other: Any) -> "Point2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Point2D(vector=self.vector + other)

    def __radd__(self, other: Any) -> "Point2D":
        return self.__add__(other)

    def transform(self, transformation: Transformation2D) -> "Point2D":
        """
        Применение преобразования к точке.

        Точка трактуется как origin + смещение: преобразование применяется
        к смещению, из результата собирается новая точка.
        """
        return Point2D(vector=self.vector.transform(transformation))

    def is_close(
        self,
        other: "Point2D",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        return self.vector.is_close(other.vector, rel_tol, abs_tol)

    def __str__(self) -> str:
        return f"P {self.vector.show(11)}"
