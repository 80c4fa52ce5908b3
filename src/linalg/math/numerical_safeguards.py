"""
Numerical Safeguards — базовые численные примитивы ядра

Модуль задаёт epsilon-параметры и помощники, общие для всех операций ядра:
- Epsilon-параметры для сравнений float, пивотов и round-trip проверок
- Проверка конечности значений (NaN/Inf)
- Epsilon-сравнения float с учётом машинной точности
- Clamp (в частности, аргумента acos)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не мутирует входные данные
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений
EPS_CALC: Final[float] = 1e-12

# Порог "нулевого" пивота при исключении Гаусса и вырожденной строки (M - λI)
EPS_PIVOT: Final[float] = 1e-10

# Относительная толерантность сравнения float
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность сравнения float
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Толерантность round-trip проверок (M · M⁻¹ ≈ I)
EPS_ROUND_TRIP: Final[float] = 1e-6


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def all_finite(values: Iterable[float]) -> bool:
    """True если все значения конечные."""
    return all(math.isfinite(v) for v in values)


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
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def max_abs(values: Iterable[float]) -> float:
    """Максимум модулей (0.0 для пустой последовательности)."""
    return max((abs(v) for v in values), default=0.0)


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Используется, в частности, для аргумента acos: накопленная ошибка
    округления даёт значения вроде 1.0000000002.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(1.0000000002, -1.0, 1.0)
        1.0
        >>> clamp(-1.5, -1.0, 1.0)
        -1.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_non_zero(value: float, name: str) -> None:
    """
    Валидация, что значение конечное и строго не равно нулю.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value == 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value == 0.0:
        raise ValueError(f"{name} must be non-zero, got {value}")
