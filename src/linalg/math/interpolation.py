"""
Interpolation — интерполяция для анимации переходов

lerp:   a + (b − a)·t
slerp:  сферическая интерполяция направлений (Vector3) по дуге большого круга

t не ограничивается [0, 1]: экстраполяция допустима и остаётся на
ответственности вызывающего кода.
"""

import math
from typing import Final, TypeVar

from src.linalg.domain.errors import ZeroVectorError
from src.linalg.domain.vectors import Vector2, Vector3, Vector4
from src.linalg.math.numerical_safeguards import clamp
from src.linalg.math.vector_ops import add, dot, normalize, scale, subtract

V = TypeVar("V", Vector2, Vector3, Vector4)

# Ниже этого sin θ векторы считаются (анти)коллинеарными, slerp → nlerp
SLERP_SIN_EPS: Final[float] = 1e-6


def lerp(a: float, b: float, t: float) -> float:
    """Линейная интерполяция скаляров."""
    return a + (b - a) * t


def lerp_vector(a: V, b: V, t: float) -> V:
    """Покомпонентная линейная интерполяция векторов одной размерности."""
    return add(a, scale(subtract(b, a), t))


def slerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    """
    Сферическая линейная интерполяция между направлениями a и b.

    Входы нормализуются, результат — единичный вектор. Если угол между
    направлениями вырожден (sin θ < SLERP_SIN_EPS), используется
    нормализованный lerp.

    Raises:
        ZeroVectorError: Если a или b нулевой (направление не определено),
            либо a и b противоположны и nlerp проходит через ноль
    """
    try:
        ua = normalize(a)
        ub = normalize(b)
    except ZeroVectorError as e:
        raise ZeroVectorError("slerp is undefined for a zero-magnitude direction") from e

    cos_theta = clamp(dot(ua, ub), -1.0, 1.0)
    theta = math.acos(cos_theta)
    sin_theta = math.sin(theta)

    if sin_theta < SLERP_SIN_EPS:
        return normalize(lerp_vector(ua, ub, t))

    wa = math.sin((1.0 - t) * theta) / sin_theta
    wb = math.sin(t * theta) / sin_theta
    return add(scale(ua, wa), scale(ub, wb))
