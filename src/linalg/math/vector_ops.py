"""
VectorOps — арифметика 2D/3D векторов

Все операции чистые и возвращают новые значения. Операции над двумя
векторами требуют одинаковой размерности (иначе DimensionMismatchError).

Частичные операции (деление на модуль или квадрат модуля):
- normalize(v)          → ZeroVectorError для нулевого v
- projection(v, onto)   → ZeroVectorError для нулевого onto
- angle_between(a, b)   → ZeroVectorError если любой операнд нулевой

ФОРМУЛЫ:
    dot(a, b)        = Σ a_i·b_i
    magnitude(v)     = hypot(v_1, ..., v_n)       (без переполнения квадратов)
    cross_z(a, b)    = a.x·b.y − a.y·b.x          (ориентированная площадь)
    cross(a, b)      = (a.y·b.z − a.z·b.y, a.z·b.x − a.x·b.z, a.x·b.y − a.y·b.x)
    angle_between    = acos(clamp(dot / (|a|·|b|), −1, 1))
    projection(v, b) = (dot(v, b) / dot(b, b)) · b
    perpendicular(v) = (−y, x)                    (поворот на 90° CCW)
"""

import math
from typing import TypeVar

from src.linalg.domain.errors import DimensionMismatchError, ZeroVectorError
from src.linalg.domain.vectors import Vector2, Vector3, Vector4
from src.linalg.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    clamp,
    is_close,
)

V = TypeVar("V", Vector2, Vector3, Vector4)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def _require_same_size(a, b, operation: str) -> None:
    if type(a) is not type(b):
        raise DimensionMismatchError(
            f"{operation}: operands must have the same dimension, "
            f"got {type(a).__name__} and {type(b).__name__}"
        )


def _require_type(v, expected: type, operation: str) -> None:
    if not isinstance(v, expected):
        raise DimensionMismatchError(
            f"{operation} is defined for {expected.__name__} only, got {type(v).__name__}"
        )


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: V, b: V) -> V:
    """Покомпонентная сумма a + b."""
    _require_same_size(a, b, "add")
    return type(a).from_components([x + y for x, y in zip(a.components(), b.components())])


def subtract(a: V, b: V) -> V:
    """Покомпонентная разность a − b."""
    _require_same_size(a, b, "subtract")
    return type(a).from_components([x - y for x, y in zip(a.components(), b.components())])


def scale(v: V, factor: float) -> V:
    """Умножение вектора на скаляр."""
    return type(v).from_components([c * factor for c in v.components()])


def negate(v: V) -> V:
    """Противоположный вектор −v."""
    return scale(v, -1.0)


def dot(a: V, b: V) -> float:
    """Скалярное произведение."""
    _require_same_size(a, b, "dot")
    total = 0.0
    for x, y in zip(a.components(), b.components()):
        total += x * y
    return total


def magnitude_squared(v: V) -> float:
    """Квадрат модуля |v|²."""
    return dot(v, v)


def magnitude(v: V) -> float:
    """
    Модуль (длина) вектора.

    Examples:
        >>> magnitude(Vector2(x=3, y=4))
        5.0
    """
    return math.hypot(*v.components())


def distance(a: V, b: V) -> float:
    """Расстояние между точками a и b."""
    return magnitude(subtract(a, b))


def normalize(v: V) -> V:
    """
    Единичный вектор того же направления.

    Raises:
        ZeroVectorError: Если v нулевой
    """
    mag = magnitude(v)
    if mag == 0.0:
        raise ZeroVectorError(f"Cannot normalize a zero vector: {v!r}")
    return type(v).from_components([c / mag for c in v.components()])


# =============================================================================
# ПРОИЗВЕДЕНИЯ
# =============================================================================


def cross_z(a: Vector2, b: Vector2) -> float:
    """
    2D векторное произведение (z-компонента, ориентированная площадь).

    Положительно, если поворот от a к b против часовой стрелки.
    """
    _require_type(a, Vector2, "cross_z")
    _require_type(b, Vector2, "cross_z")
    return a.x * b.y - a.y * b.x


def cross(a: Vector3, b: Vector3) -> Vector3:
    """3D векторное произведение a × b (правая тройка)."""
    _require_type(a, Vector3, "cross")
    _require_type(b, Vector3, "cross")
    return Vector3(
        x=a.y * b.z - a.z * b.y,
        y=a.z * b.x - a.x * b.z,
        z=a.x * b.y - a.y * b.x,
    )


# =============================================================================
# ГЕОМЕТРИЯ
# =============================================================================


def angle_between(a: V, b: V) -> float:
    """
    Угол между векторами в радианах, [0, π].

    Аргумент acos ограничивается [-1, 1]: без этого накопленная ошибка
    округления (например, 1.0000000002) даёт NaN.

    Raises:
        ZeroVectorError: Если любой из векторов нулевой
    """
    _require_same_size(a, b, "angle_between")
    mag_a = magnitude(a)
    mag_b = magnitude(b)
    if mag_a == 0.0 or mag_b == 0.0:
        raise ZeroVectorError("angle_between is undefined for a zero-magnitude operand")

    cos_angle = clamp(dot(a, b) / (mag_a * mag_b), -1.0, 1.0)
    return math.acos(cos_angle)


def projection(v: V, onto: V) -> V:
    """
    Проекция v на направление onto.

    Raises:
        ZeroVectorError: Если onto нулевой
    """
    _require_same_size(v, onto, "projection")
    onto_mag_sq = magnitude_squared(onto)
    if onto_mag_sq == 0.0:
        raise ZeroVectorError("Cannot project onto a zero vector")
    return scale(onto, dot(v, onto) / onto_mag_sq)


def reflect(v: Vector2 | Vector3, axis: str) -> Vector2 | Vector3:
    """
    Отражение относительно координатной оси.

    Компоненты, ортогональные оси, меняют знак; компонента вдоль оси
    сохраняется. Для 2D: axis="x" → (x, −y), axis="y" → (−x, y).

    Args:
        v: Vector2 или Vector3
        axis: "x", "y" (или "z" для Vector3)

    Raises:
        ValueError: Если ось неизвестна для данной размерности
    """
    if not isinstance(v, (Vector2, Vector3)):
        raise DimensionMismatchError(
            f"reflect is defined for Vector2 and Vector3, got {type(v).__name__}"
        )
    if axis not in v.axes:
        raise ValueError(f"Unknown reflection axis {axis!r} for {type(v).__name__}")

    return type(v).from_components(
        [c if name == axis else -c for name, c in zip(v.axes, v.components())]
    )


def perpendicular(v: Vector2) -> Vector2:
    """Перпендикуляр (−y, x): поворот на 90° против часовой стрелки."""
    _require_type(v, Vector2, "perpendicular")
    return Vector2(x=-v.y, y=v.x)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def vectors_close(
    a: V,
    b: V,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """Покомпонентное равенство с толерантностью (для производных результатов)."""
    _require_same_size(a, b, "vectors_close")
    return all(
        is_close(x, y, rel_tol=rel_tol, abs_tol=abs_tol)
        for x, y in zip(a.components(), b.components())
    )
