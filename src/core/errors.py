"""
Errors — иерархия исключений геометрического ядра

Конструирование и алгебра векторов/точек/углов тотальны. Исключения
возникают только при нарушении контрактов внешних коллабораторов:
- скалярный тип не умеет то, что от него требуют (inner product, basis)
- transform engine вернул не вектор
"""


class GeometryError(Exception):
    """Базовое исключение геометрического ядра."""


class MissingCapabilityError(GeometryError, TypeError):
    """
    Скалярный тип не поддерживает запрошенную алгебраическую возможность.

    Например, dot() для Vector2D над скаляром без inner product
    или decompose() над скаляром без базиса.
    """


class TransformContractError(GeometryError, TypeError):
    """Transform engine нарушил контракт apply(transformation, vector) -> vector."""
