"""
MatrixOps — арифметика квадратных матриц 2×2, 3×3, 4×4

Все операции чистые: каждая возвращает новую матрицу того же класса.
Смешивание размеров — ошибка вызывающего кода (DimensionMismatchError),
ядро никогда не усекает и не дополняет операнды.

Умножение реализует общее определение строка·столбец:
    C[i][j] = A[i][0]·B[0][j] + A[i][1]·B[1][j] + ...
с накоплением строго слева направо. sum() не используется: начиная с
Python 3.12 он суммирует float с компенсацией, что меняет округление.

Применение к вектору:
- apply_to_vector:   Matrix2·Vector2, Matrix3·Vector3, Matrix4·Vector4
- apply_homogeneous: Matrix3 на 2D точку / Matrix4 на 3D точку; неявная
  единица дописывается на входе и отбрасывается на выходе (без деления на w)
"""

from typing import TypeVar

from src.linalg.domain.errors import DimensionMismatchError
from src.linalg.domain.matrices import (
    Matrix2,
    Matrix3,
    Matrix4,
    SquareMatrix,
    matrix_class_for_size,
)
from src.linalg.domain.vectors import Vector2, Vector3, Vector4
from src.linalg.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)

M = TypeVar("M", Matrix2, Matrix3, Matrix4)

# Размерность вектора для apply_to_vector
_VECTOR_FOR_MATRIX: dict[type, type] = {Matrix2: Vector2, Matrix3: Vector3, Matrix4: Vector4}

# Размерность точки для apply_homogeneous (на единицу меньше размера матрицы)
_POINT_FOR_MATRIX: dict[type, type] = {Matrix3: Vector2, Matrix4: Vector3}


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def _require_same_size(a: SquareMatrix, b: SquareMatrix, operation: str) -> None:
    if type(a) is not type(b):
        raise DimensionMismatchError(
            f"{operation}: matrices must have the same size, "
            f"got {type(a).__name__} and {type(b).__name__}"
        )


def _dot_row(row: tuple[float, ...], values: tuple[float, ...]) -> float:
    total = 0.0
    for x, y in zip(row, values):
        total += x * y
    return total


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def identity(size: int) -> Matrix2 | Matrix3 | Matrix4:
    """
    Единичная матрица размера size.

    Raises:
        DimensionMismatchError: Если size не 2, 3 или 4
    """
    return matrix_class_for_size(size).identity()


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: M, b: M) -> M:
    """Поэлементная сумма."""
    _require_same_size(a, b, "add")
    return type(a).from_rows(
        [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a.rows, b.rows)]
    )


def subtract(a: M, b: M) -> M:
    """Поэлементная разность."""
    _require_same_size(a, b, "subtract")
    return type(a).from_rows(
        [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a.rows, b.rows)]
    )


def scale_matrix(m: M, factor: float) -> M:
    """Умножение матрицы на скаляр."""
    return type(m).from_rows([[value * factor for value in row] for row in m.rows])


def multiply(a: M, b: M) -> M:
    """
    Произведение матриц A·B.

    Требует A.cols == B.rows; для квадратных матриц ядра это означает
    одинаковый размер.

    Raises:
        DimensionMismatchError: Если размеры различаются
    """
    _require_same_size(a, b, "multiply")
    columns = [b.column(j) for j in range(b.size)]
    return type(a).from_rows([[_dot_row(row, col) for col in columns] for row in a.rows])


def compose(*matrices: M) -> M:
    """
    Произведение цепочки матриц слева направо: compose(A, B, C) = A·B·C.

    При применении к вектору первой действует самая правая матрица.

    Raises:
        ValueError: Если не передано ни одной матрицы
        DimensionMismatchError: Если размеры различаются
    """
    if not matrices:
        raise ValueError("compose requires at least one matrix")

    result = matrices[0]
    for m in matrices[1:]:
        result = multiply(result, m)
    return result


def transpose(m: M) -> M:
    """Транспонирование."""
    return type(m).from_rows([m.column(j) for j in range(m.size)])


def trace(m: SquareMatrix) -> float:
    """След (сумма диагонали)."""
    total = 0.0
    for i in range(m.size):
        total += m.rows[i][i]
    return total


# =============================================================================
# ПРИМЕНЕНИЕ К ВЕКТОРАМ
# =============================================================================


def apply_to_vector(m: SquareMatrix, v: Vector2 | Vector3 | Vector4):
    """
    Произведение матрицы на вектор той же размерности.

    Raises:
        DimensionMismatchError: Если размерность вектора не равна размеру матрицы
    """
    vector_cls = _VECTOR_FOR_MATRIX.get(type(m))
    if vector_cls is None or type(v) is not vector_cls:
        raise DimensionMismatchError(
            f"apply_to_vector: vector size must match matrix size, "
            f"got {type(m).__name__}·{type(v).__name__}"
        )

    components = v.components()
    return vector_cls.from_components([_dot_row(row, components) for row in m.rows])


def apply_homogeneous(m: Matrix3 | Matrix4, point: Vector2 | Vector3) -> Vector2 | Vector3:
    """
    Однородное преобразование точки: Matrix3 на Vector2, Matrix4 на Vector3.

    К точке дописывается неявная единица, последняя координата результата
    отбрасывается. Перспективное деление на w НЕ выполняется
    (см. transform3d.project_point).

    Raises:
        DimensionMismatchError: Если матрица/точка несовместимы
    """
    point_cls = _POINT_FOR_MATRIX.get(type(m))
    if point_cls is None or type(point) is not point_cls:
        raise DimensionMismatchError(
            f"apply_homogeneous supports Matrix3·Vector2 and Matrix4·Vector3, "
            f"got {type(m).__name__}·{type(point).__name__}"
        )

    components = point.components() + (1.0,)
    # Последняя строка (однородная координата) отбрасывается
    return point_cls.from_components([_dot_row(row, components) for row in m.rows[:-1]])


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def matrices_close(
    a: M,
    b: M,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """Поэлементное равенство с толерантностью."""
    _require_same_size(a, b, "matrices_close")
    return all(
        is_close(x, y, rel_tol=rel_tol, abs_tol=abs_tol)
        for x, y in zip(a.entries(), b.entries())
    )
