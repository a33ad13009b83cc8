"""
Coordinates — построение и деструктуризация по компонентам

Окружающая система использует для N-мерных точек инфиксное соглашение
"построить из компонент" / "разобрать на компоненты" (x & y, x :& y).
Здесь оно сужено до 2D: двухуровневая декомпозиция, которая
заканчивается ровно двумя скалярными координатами. Обобщения на N
измерений нет.
"""

from typing import Any, NamedTuple, Protocol, runtime_checkable


class Coords2(NamedTuple):
    """Декомпозиция 2D значения: предыдущее измерение и финальная координата."""

    prev: Any
    final: Any


@runtime_checkable
class Coordinates(Protocol):
    """Тип, собираемый из Coords2 и разбираемый обратно."""

    @classmethod
    def build(cls, prev: Any, final: Any) -> Any: ...

    def coords(self) -> Coords2: ...
