"""
Тесты для модели Point2D

Проверяет:
1. Создание, деструктуризацию и immutability
2. Аффинные законы (point - point, point + vector)
3. Запрет операций без аффинного смысла (point + point и т.п.)
4. Применение преобразований через origin + смещение
"""

import math

import pytest
from pydantic import ValidationError

from src.core.geometry import R2, Coordinates, Coords2, Point2D, Vector2D

POINTS = [
    Point2D.from_pair((1.0, 2.0)),
    Point2D.from_pair((-4.0, 0.5)),
    Point2D.from_pair((0.0, 0.0)),
    Point2D.from_pair((1e3, -2.5e2)),
]

VECTORS = [
    Vector2D.from_pair((0.0, 0.0)),
    Vector2D.from_pair((3.0, -1.0)),
    Vector2D.from_pair((-0.25, 8.0)),
]


class _Rotation:
    """Минимальный transform engine: поворот вокруг начала координат."""

    def __init__(self, angle_rad: float) -> None:
        self.cos_a = math.cos(angle_rad)
        self.sin_a = math.sin(angle_rad)

    def apply(self, vector: Vector2D) -> Vector2D:
        x, y = vector.to_pair()
        return R2(x=x * self.cos_a - y * self.sin_a, y=x * self.sin_a + y * self.cos_a)


class _Scaling:
    def __init__(self, factor: float) -> None:
        self.factor = factor

    def apply(self, vector: Vector2D) -> Vector2D:
        return vector.scale(self.factor)


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestPointConstruction:
    """Тесты создания Point2D"""

    def test_from_pair_to_pair(self) -> None:
        """fromPair/toPair обратимы"""
        assert Point2D.from_pair((3.0, 4.0)).to_pair() == (3.0, 4.0)

    def test_components_are_float(self) -> None:
        """Компоненты точки — double"""
        p = Point2D.from_pair((3, 4))
        assert all(isinstance(c, float) for c in p.to_pair())

    def test_from_generic_vector(self) -> None:
        """Vector2D без параметра приводится к R2"""
        p = Point2D.from_vector(Vector2D(x=1, y=2))
        assert isinstance(p.vector, R2)
        assert p.to_pair() == (1.0, 2.0)

    def test_origin(self) -> None:
        """origin — (0, 0)"""
        assert Point2D.origin().to_pair() == (0.0, 0.0)

    def test_vector_roundtrip(self) -> None:
        """Явный переход vector <-> point через origin"""
        v = Vector2D.from_pair((5.0, -6.0))
        p = Point2D.from_vector(v)
        assert p.to_vector() == v
        assert p == Point2D.origin() + v
        assert p - Point2D.origin() == v

    def test_coords_build(self) -> None:
        """coords/build"""
        p = Point2D.build(1.0, 2.0)
        assert p.coords() == Coords2(1.0, 2.0)
        assert isinstance(p, Coordinates)
        assert Point2D.build(*p.coords()) == p

    def test_immutable(self) -> None:
        """Точка immutable (frozen=True)"""
        p = Point2D.from_pair((1.0, 2.0))
        with pytest.raises(ValidationError):
            p.vector = R2(x=0.0, y=0.0)  # type: ignore

    def test_rejects_non_numeric(self) -> None:
        """Нечисловые координаты отклоняются"""
        with pytest.raises(ValidationError):
            Point2D.from_pair(("x", 1.0))

    def test_point_is_not_vector(self) -> None:
        """Точка и вектор с одинаковыми координатами не равны"""
        assert Point2D.from_pair((1.0, 2.0)) != Vector2D.from_pair((1.0, 2.0))

    def test_json_roundtrip(self) -> None:
        """Point2D -> JSON -> Point2D"""
        p = Point2D.from_pair((-1.5, 2.0))
        assert Point2D.model_validate_json(p.model_dump_json()) == p


# =============================================================================
# AFFINE LAWS
# =============================================================================


class TestAffineLaws:
    """Аффинные законы"""

    def test_point_minus_same_point(self) -> None:
        """(1, 2) - (1, 2) == нулевой вектор"""
        p = Point2D.from_pair((1.0, 2.0))
        d = p - Point2D.from_pair((1.0, 2.0))
        assert isinstance(d, Vector2D)
        assert d.to_pair() == (0.0, 0.0)

    @pytest.mark.parametrize("p", POINTS)
    def test_self_difference_is_zero(self, p: Point2D) -> None:
        """p - p == 0"""
        assert p - p == Vector2D.zero()

    @pytest.mark.parametrize("p", POINTS)
    @pytest.mark.parametrize("q", POINTS)
    def test_translate_by_difference(self, p: Point2D, q: Point2D) -> None:
        """p + (q - p) == q"""
        assert (p + (q - p)).is_close(q)

    @pytest.mark.parametrize("p", POINTS)
    @pytest.mark.parametrize("v", VECTORS)
    @pytest.mark.parametrize("w", VECTORS)
    def test_translation_composes(self, p: Point2D, v: Vector2D, w: Vector2D) -> None:
        """(p + v) + w == p + (v + w)"""
        assert ((p + v) + w).is_close(p + (v + w))

    def test_displacement_direction(self) -> None:
        """p - q — смещение от q к p"""
        p = Point2D.from_pair((4.0, 6.0))
        q = Point2D.from_pair((1.0, 2.0))
        assert (p - q).to_pair() == (3.0, 4.0)

    def test_vector_plus_point(self) -> None:
        """v + p == p + v"""
        p = Point2D.from_pair((1.0, 1.0))
        v = Vector2D.from_pair((2.0, 3.0))
        assert v + p == p + v

    def test_point_minus_vector(self) -> None:
        """p - v == p + (-v)"""
        p = Point2D.from_pair((1.0, 1.0))
        v = Vector2D.from_pair((2.0, 3.0))
        assert p - v == p + (-v)


class TestForbiddenOperations:
    """Операции без аффинного смысла отклоняются"""

    def test_point_plus_point(self) -> None:
        """point + point — TypeError"""
        p = Point2D.from_pair((1.0, 2.0))
        with pytest.raises(TypeError):
            p + p  # type: ignore

    def test_negate_point(self) -> None:
        """-point — TypeError"""
        with pytest.raises(TypeError):
            -Point2D.from_pair((1.0, 2.0))  # type: ignore

    def test_scale_point(self) -> None:
        """scalar * point — TypeError"""
        p = Point2D.from_pair((1.0, 2.0))
        with pytest.raises(TypeError):
            2.0 * p  # type: ignore
        with pytest.raises(TypeError):
            p * 2.0  # type: ignore

    def test_vector_minus_point(self) -> None:
        """vector - point — TypeError"""
        with pytest.raises(TypeError):
            Vector2D.from_pair((1.0, 2.0)) - Point2D.from_pair((1.0, 2.0))  # type: ignore

    def test_point_plus_tuple(self) -> None:
        """Нет неявной конверсии из tuple"""
        with pytest.raises(TypeError):
            Point2D.from_pair((1.0, 2.0)) + (1.0, 1.0)  # type: ignore


# =============================================================================
# TRANSFORMATIONS
# =============================================================================


class TestPointTransform:
    """Применение Transformation2D к точке"""

    def test_rotation_quarter_turn(self) -> None:
        """Поворот на 90° переводит (1, 0) в (0, 1)"""
        p = Point2D.from_pair((1.0, 0.0))
        rotated = p.transform(_Rotation(math.pi / 2))
        assert isinstance(rotated, Point2D)
        assert rotated.is_close(Point2D.from_pair((0.0, 1.0)), abs_tol=1e-12)

    def test_scaling_about_origin(self) -> None:
        """Масштабирование применяется к смещению от начала координат"""
        p = Point2D.from_pair((2.0, -3.0))
        assert p.transform(_Scaling(2.0)) == Point2D.from_pair((4.0, -6.0))

    def test_origin_fixed_by_linear_map(self) -> None:
        """Линейное отображение сохраняет начало координат"""
        assert Point2D.origin().transform(_Rotation(1.0)) == Point2D.origin()
