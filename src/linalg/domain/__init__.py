"""
Domain models and value objects.

Неизменяемые значения ядра: векторы, кватернион, матрицы фиксированного
размера, собственные пары, а также исключения ядра.
"""

from src.linalg.domain.eigen import Complex, EigenDecomposition, EigenPair
from src.linalg.domain.errors import DimensionMismatchError, ZeroVectorError
from src.linalg.domain.matrices import (
    Matrix2,
    Matrix3,
    Matrix4,
    SquareMatrix,
    matrix_class_for_size,
    matrix_from_rows,
)
from src.linalg.domain.vectors import (
    Quaternion,
    Vector2,
    Vector3,
    Vector4,
    vector_from_components,
)

__all__ = [
    # Errors
    "DimensionMismatchError",
    "ZeroVectorError",
    # Vectors
    "Vector2",
    "Vector3",
    "Vector4",
    "Quaternion",
    "vector_from_components",
    # Matrices
    "SquareMatrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "matrix_class_for_size",
    "matrix_from_rows",
    # Eigen
    "Complex",
    "EigenPair",
    "EigenDecomposition",
]
