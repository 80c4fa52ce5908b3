"""
Vectors — неизменяемые векторы и кватернион

Immutable Pydantic модели (frozen=True) для значений, которыми обмениваются
ядро и слой визуализации:
- Vector2 {x, y}
- Vector3 {x, y, z}
- Vector4 {x, y, z, w} (однородные координаты)
- Quaternion {w, x, y, z}

Модели не имеют идентичности: равенство покомпонентное. Лишние поля
запрещены (extra="forbid"), поэтому {x, y, z} не может молча стать Vector2.
"""

import math
from typing import ClassVar, Sequence

from pydantic import BaseModel

from src.linalg.domain.errors import DimensionMismatchError


# =============================================================================
# BASE
# =============================================================================


class _VectorBase(BaseModel):
    """Общая часть векторов фиксированной размерности."""

    axes: ClassVar[tuple[str, ...]] = ()

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def size(self) -> int:
        return len(self.axes)

    def components(self) -> tuple[float, ...]:
        """Компоненты в порядке осей."""
        return tuple(getattr(self, axis) for axis in self.axes)

    @classmethod
    def from_components(cls, values: Sequence[float]):
        """
        Создание вектора из последовательности компонент.

        Raises:
            DimensionMismatchError: Если длина не совпадает с размерностью
        """
        if len(values) != len(cls.axes):
            raise DimensionMismatchError(
                f"{cls.__name__} expects {len(cls.axes)} components, got {len(values)}"
            )
        return cls(**dict(zip(cls.axes, values)))


# =============================================================================
# VECTOR MODELS
# =============================================================================


class Vector2(_VectorBase):
    """Вектор (или точка) на плоскости."""

    axes: ClassVar[tuple[str, ...]] = ("x", "y")

    x: float
    y: float


class Vector3(_VectorBase):
    """Вектор (или точка) в пространстве."""

    axes: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    x: float
    y: float
    z: float


class Vector4(_VectorBase):
    """
    Вектор в однородных координатах.

    w = 1 для точек, w = 0 для направлений. После перспективной проекции
    w произвольно, деление на w выполняет вызывающий код
    (см. transform3d.project_point).
    """

    axes: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    x: float
    y: float
    z: float
    w: float


_VECTOR_BY_SIZE: dict[int, type[_VectorBase]] = {2: Vector2, 3: Vector3, 4: Vector4}


def vector_from_components(values: Sequence[float]) -> Vector2 | Vector3 | Vector4:
    """
    Создание вектора подходящей размерности по числу компонент.

    Args:
        values: 2, 3 или 4 компоненты

    Returns:
        Vector2, Vector3 или Vector4

    Raises:
        DimensionMismatchError: Если число компонент не 2, 3 или 4
    """
    vector_cls = _VECTOR_BY_SIZE.get(len(values))
    if vector_cls is None:
        raise DimensionMismatchError(
            f"Unsupported vector size {len(values)}; expected 2, 3 or 4"
        )
    return vector_cls.from_components(values)


# =============================================================================
# QUATERNION
# =============================================================================


class Quaternion(BaseModel):
    """
    Кватернион {w, x, y, z}.

    Для преобразования в матрицу поворота ожидается единичная норма.
    Ядро НЕ нормализует кватернион само: это предусловие вызывающего кода,
    для которого есть normalized().
    """

    w: float
    x: float
    y: float
    z: float

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(w=1.0, x=0.0, y=0.0, z=0.0)

    def norm(self) -> float:
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Quaternion":
        """
        Единичный кватернион того же направления.

        Raises:
            ZeroDivisionError: Если норма равна нулю
        """
        n = self.norm()
        if n == 0.0:
            raise ZeroDivisionError("Cannot normalize a zero quaternion")
        return Quaternion(w=self.w / n, x=self.x / n, y=self.y / n, z=self.z / n)
