"""
Numerical Safeguards — толерантности для сравнения float

Модуль задаёт единые epsilon-параметры для всех приближённых сравнений
в геометрическом ядре:
- Сравнение компонент векторов и точек (Vector2D.is_close, Point2D.is_close)
- Сравнение углов через каноническое представление в оборотах (turns)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точное равенство (==) остаётся структурным и никогда не ослабляется
2. Все приближённые сравнения проходят через is_close этого модуля
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Абсолютная толерантность для углов в оборотах.
# 1e-12 оборота ≈ 3.6e-10 градуса
EPS_ANGLE_TURNS: Final[float] = 1e-12


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Приближённое равенство двух скаляров геометрического ядра.

    Общая точка для Vector2D.is_close (покомпонентно), Point2D.is_close
    и Angle.is_close (по значениям в оборотах). Принимает любые Real,
    включая Fraction; бесконечности одного знака равны, nan не равен ничему.

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность (решающая вблизи нуля)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
