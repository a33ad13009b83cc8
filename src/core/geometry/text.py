"""
Text — каноническая текстовая форма вектора "x & y"

Единственный сериализованный формат ядра (бинарного формата нет).

ГРАММАТИКА:
    vector    := component "&" component | "(" vector ")"
    component := number | "(" signed ")"
    signed    := component | "-" number
    number    := десятичная запись float | inf | nan

- Отрицательная компонента всегда в скобках: "(-3.0) & 4.0"
- Нефинитные значения читаются в форме str(float): "inf & (-inf)"
- Всё выражение берётся в скобки при вложении в контекст
  с приоритетом >= 7 (приоритет инфиксного "&")
- Вложенные векторы-компоненты рендерятся с приоритетом 8 и потому в скобках

Парсинг частичен: несовпадение возвращает None, исключений нет.
"""

import logging
import re
from typing import Any, Final, Optional

logger = logging.getLogger(__name__)

# Приоритет инфиксного "&"
SHOW_PRECEDENCE_AMP: Final[int] = 7

_NUMBER = r"\d+(?:\.\d+)?(?:[eE][-+]?\d+)?|(?i:inf(?:inity)?|nan)"
_TOKEN_RE = re.compile(rf"\s*(?:(?P<number>{_NUMBER})|(?P<punct>[()&-]))")
_END_RE = re.compile(r"\s*\Z")
_PUNCTUATION: Final[frozenset[str]] = frozenset("()&-")

_Tokens = list[str]


# =============================================================================
# SHOW
# =============================================================================


def show_component(value: Any, precedence: int = SHOW_PRECEDENCE_AMP + 1) -> str:
    """
    Рендер одной компоненты вектора.

    Args:
        value: Скаляр (число или вложенный вектор с методом show)
        precedence: Приоритет контекста для вложенных векторов

    Returns:
        str(value), отрицательные значения в скобках
    """
    show = getattr(value, "show", None)
    if callable(show):
        return show(precedence)

    text = str(value)
    if text.startswith("-"):
        return f"({text})"
    return text


def show_pair(x: Any, y: Any, precedence: int = 0) -> str:
    """
    Рендер пары компонент в форме "x & y".

    Args:
        x: Первая компонента
        y: Вторая компонента
        precedence: Приоритет окружающего контекста

    Returns:
        "x & y" или "(x & y)" при precedence >= 7
    """
    text = f"{show_component(x)} & {show_component(y)}"
    if precedence >= SHOW_PRECEDENCE_AMP:
        return f"({text})"
    return text


# =============================================================================
# PARSE
# =============================================================================


def _tokenize(text: str) -> Optional[_Tokens]:
    tokens: _Tokens = []
    pos = 0
    while _END_RE.match(text, pos) is None:
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            return None
        tokens.append(match.group("number") or match.group("punct"))
        pos = match.end()
    return tokens


def _is_number_at(tokens: _Tokens, i: int) -> bool:
    return i < len(tokens) and tokens[i] not in _PUNCTUATION


def _at(tokens: _Tokens, i: int, expected: str) -> bool:
    return i < len(tokens) and tokens[i] == expected


def _run(tokens: _Tokens, i: int, bracket: str) -> int:
    """Число подряд идущих скобок bracket начиная с позиции i."""
    j = i
    while _at(tokens, j, bracket):
        j += 1
    return j - i


def _component(tokens: _Tokens, i: int) -> Optional[tuple[float, int]]:
    # component = k * "(" + (number | "-" number при k >= 1) + k * ")"
    depth = _run(tokens, i, "(")
    core = i + depth
    if _is_number_at(tokens, core):
        value, end = float(tokens[core]), core + 1
    elif depth > 0 and _at(tokens, core, "-") and _is_number_at(tokens, core + 1):
        value, end = -float(tokens[core + 1]), core + 2
    else:
        return None

    if _run(tokens, end, ")") < depth:
        return None
    return value, end + depth


def _vector(tokens: _Tokens, i: int) -> Optional[tuple[tuple[float, float], int]]:
    # vector = m * "(" + component "&" component + m * ")"
    # Ведущие скобки делятся между вектором и первой компонентой: первой
    # компоненте принадлежат столько, сколько ")" стоит перед "&".
    leading = _run(tokens, i, "(")
    core = i + leading
    core_end = core + 2 if _at(tokens, core, "-") else core + 1
    wrap = leading - _run(tokens, core_end, ")")
    if wrap < 0:
        return None

    x = _component(tokens, i + wrap)
    if x is None or not _at(tokens, x[1], "&"):
        return None
    y = _component(tokens, x[1] + 1)
    if y is None or _run(tokens, y[1], ")") < wrap:
        return None
    return (x[0], y[0]), y[1] + wrap


def parse_pair(text: str) -> Optional[tuple[float, float]]:
    """
    Парсинг строки "x & y" в пару float.

    Принимает ровно грамматику модуля: пробелы произвольны, внешние
    скобки допускаются в любом количестве, отрицательные компоненты
    обязаны быть в скобках.

    Args:
        text: Входная строка

    Returns:
        (x, y) при полном совпадении, иначе None

    Examples:
        >>> parse_pair("(-3.0) & 4.0")
        (-3.0, 4.0)
        >>> parse_pair("-3.0 & 4.0") is None
        True
    """
    tokens = _tokenize(text)
    if not tokens:
        logger.debug("No vector parse for %r: unexpected characters", text)
        return None

    parsed = _vector(tokens, 0)
    if parsed is None or parsed[1] != len(tokens):
        logger.debug("No vector parse for %r", text)
        return None

    return parsed[0]
