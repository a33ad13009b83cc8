"""
Geometry — примитивные типы евклидовой плоскости

Vector2D (векторное пространство), Point2D (аффинное пространство над ним),
Transformation2D (непрозрачный handle transform engine) и единицы углов.
"""

from src.core.geometry.angle import (
    DEGREES_PER_TURN,
    TAU,
    Angle,
    Degrees,
    Radians,
    Turns,
    convert_angle,
)
from src.core.geometry.coordinates import Coordinates, Coords2
from src.core.geometry.point import Point2D
from src.core.geometry.text import SHOW_PRECEDENCE_AMP, parse_pair, show_pair
from src.core.geometry.transformation import Transformable, Transformation2D, transform
from src.core.geometry.vector import R2, Axis, BasisIndex, Vector2D

__all__ = [
    # Vector2D
    "Vector2D",
    "R2",
    "Axis",
    "BasisIndex",
    # Point2D
    "Point2D",
    # Transformation2D
    "Transformation2D",
    "Transformable",
    "transform",
    # Coordinates
    "Coordinates",
    "Coords2",
    # Text form
    "SHOW_PRECEDENCE_AMP",
    "show_pair",
    "parse_pair",
    # Angle
    "TAU",
    "DEGREES_PER_TURN",
    "Angle",
    "Turns",
    "Radians",
    "Degrees",
    "convert_angle",
]
