"""
Rank — ранг матрицы через исключение Гаусса

Приведение к ступенчатому виду (row-echelon) с частичным выбором ведущего
элемента: в текущем столбце пивотом становится наибольший по модулю элемент
среди оставшихся строк. Ранг равен числу найденных пивотов.

Один и тот же путь для 2×2, 3×3 и 4×4, без специальных случаев.

Граничные случаи:
- нулевая матрица → 0
- дублирующиеся/пропорциональные строки понижают ранг
- ранг никогда не превышает размер матрицы
"""

from src.linalg.domain.matrices import SquareMatrix
from src.linalg.math.numerical_safeguards import EPS_PIVOT


def matrix_rank(m: SquareMatrix, tol: float = EPS_PIVOT) -> int:
    """
    Ранг квадратной матрицы.

    Args:
        m: Matrix2, Matrix3 или Matrix4
        tol: Абсолютный порог, ниже которого элемент считается нулём

    Returns:
        Ранг в диапазоне [0, size]

    Examples:
        >>> matrix_rank(Matrix2.from_rows([[1, 2], [2, 4]]))
        1
    """
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")

    # Рабочая копия: входная матрица неизменяема
    work = [list(row) for row in m.rows]
    n_rows = len(work)
    n_cols = len(work[0]) if work else 0

    rank = 0
    row = 0

    for col in range(n_cols):
        if row >= n_rows:
            break

        pivot_row = max(range(row, n_rows), key=lambda r: abs(work[r][col]))
        if abs(work[pivot_row][col]) <= tol:
            # Столбец без пивота: переходим к следующему
            continue

        if pivot_row != row:
            work[row], work[pivot_row] = work[pivot_row], work[row]

        pivot = work[row][col]
        for r in range(row + 1, n_rows):
            factor = work[r][col] / pivot
            if factor == 0.0:
                continue
            for c in range(col, n_cols):
                work[r][c] -= factor * work[row][c]

        rank += 1
        row += 1

    return rank
