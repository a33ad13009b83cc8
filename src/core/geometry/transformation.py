"""
Transformation2D — непрозрачный handle аффинного преобразования плоскости

Построение, композиция и обращение преобразований принадлежат внешнему
transform engine. Ядро лишь именует тип и опирается на единственный
контракт:

    apply(transformation, vector) -> vector

Внутренности преобразования здесь никогда не инспектируются.
"""

import logging
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from src.core.geometry.vector import Vector2D

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Transformable")


@runtime_checkable
class Transformation2D(Protocol):
    """Аффинное отображение, действующее на Vector2D[float]."""

    def apply(self, vector: "Vector2D") -> "Vector2D": ...


@runtime_checkable
class Transformable(Protocol):
    """Значение, к которому можно применить Transformation2D."""

    def transform(self, transformation: Transformation2D) -> Any: ...


def transform(transformation: Transformation2D, obj: T) -> T:
    """
    Применение преобразования к вектору или точке.

    Args:
        transformation: Handle от transform engine
        obj: Vector2D или Point2D

    Returns:
        Преобразованное значение того же вида

    Raises:
        TypeError: Если obj не поддерживает преобразования
    """
    if not isinstance(obj, Transformable):
        logger.debug("Cannot transform value of type %s", type(obj).__name__)
        raise TypeError(f"{type(obj).__name__} is not transformable")

    return obj.transform(transformation)
