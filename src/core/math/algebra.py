"""
Algebra — алгебраические возможности скалярных типов

Vector2D параметризован произвольным скаляром S. Этот модуль описывает,
что ядро требует от S, и реализует операции, зависящие от возможностей S:

- AdditiveGroup: +, унарный -, нулевой элемент
- InnerSpace: скалярное произведение (dot)
- HasBasis: разложение по базису (decompose)

Вещественные числа (numbers.Real) — сами себе inner space
(a <.> b = a * b) и имеют тривиальный одноэлементный базис с индексом None.
Любой тип с методами dot()/decompose() (в том числе сам Vector2D)
подходит как скаляр рекурсивно.

Набор возможностей замкнут: проверка выполняется через
runtime_checkable Protocol, без реестров и регистрации типов.
"""

import logging
from numbers import Real
from typing import Any, Protocol, runtime_checkable

from src.core.errors import MissingCapabilityError

logger = logging.getLogger(__name__)


# =============================================================================
# CAPABILITY PROTOCOLS
# =============================================================================


@runtime_checkable
class AdditiveGroup(Protocol):
    """Скаляр с групповой операцией сложения и обратным элементом."""

    def __add__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...


@runtime_checkable
class InnerSpace(Protocol):
    """Скаляр со скалярным произведением."""

    def dot(self, other: Any) -> Any: ...


@runtime_checkable
class HasBasis(Protocol):
    """Скаляр, раскладываемый по собственному базису."""

    def decompose(self) -> list[tuple[Any, Any]]: ...


# =============================================================================
# OPERATIONS
# =============================================================================


def additive_zero(value: Any) -> Any:
    """
    Нулевой элемент аддитивной группы, к которой принадлежит value.

    Args:
        value: Любой элемент группы (используется только его тип)

    Returns:
        0 того же числового типа для Real, value.zero_like() для векторов
    """
    if isinstance(value, Real):
        return type(value)(0)

    zero_like = getattr(value, "zero_like", None)
    if callable(zero_like):
        return zero_like()

    # x + (-x) = 0 для любой аддитивной группы
    return value + (-value)


def inner(a: Any, b: Any) -> Any:
    """
    Скалярное произведение двух скаляров.

    Args:
        a: Первый скаляр
        b: Второй скаляр

    Returns:
        a * b для вещественных чисел, a.dot(b) для InnerSpace

    Raises:
        MissingCapabilityError: Если тип не поддерживает inner product
    """
    if isinstance(a, Real) and isinstance(b, Real):
        return a * b

    if isinstance(a, InnerSpace):
        return a.dot(b)

    logger.debug("No inner product for scalar type %s", type(a).__name__)
    raise MissingCapabilityError(
        f"Scalar type {type(a).__name__} does not support an inner product"
    )


def decompose(value: Any) -> list[tuple[Any, Any]]:
    """
    Разложение скаляра по его базису.

    Для вещественных чисел базис тривиален: [(None, value)].

    Raises:
        MissingCapabilityError: Если у типа нет базиса
    """
    if isinstance(value, Real):
        return [(None, value)]

    if isinstance(value, HasBasis):
        return value.decompose()

    logger.debug("No basis for scalar type %s", type(value).__name__)
    raise MissingCapabilityError(f"Scalar type {type(value).__name__} has no basis")
