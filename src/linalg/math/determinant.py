"""
Determinant / Inverse — определители и обратные матрицы

Модуль вычисляет:
- Определитель 2×2, 3×3 (замкнутые формулы) и 4×4 (разложение по первой строке)
- Миноры, алгебраические дополнения и присоединённую матрицу (adjugate)
- Обратную матрицу как adjugate / det

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. inverse() никогда не бросает исключений для вырожденной матрицы
2. inverse() всегда возвращает "сырой" определитель вместе с результатом
3. Порог "почти вырожденности" в inverse() НЕ зашит: None возвращается
   только если обращение численно невозможно (det == 0 или переполнение),
   иначе возвращается best-effort обратная матрица. Порог для отображения
   (SINGULARITY_REPORT_EPS) применяет вызывающий код через is_near_singular

ФОРМУЛЫ:
    det [[a, b], [c, d]]                  = ad − bc
    det [[a, b, c], [d, e, f], [g, h, i]] = a(ei − fh) − b(di − fg) + c(dh − eg)
    det (4×4)                             = Σ_j (−1)^j · m[0][j] · minor(0, j)
    inverse [[a, b], [c, d]]              = (1/det) · [[d, −b], [−c, a]]
    inverse (3×3, 4×4)                    = adjugate / det,  adjugate = cofactorᵀ
"""

import logging
from dataclasses import dataclass
from typing import Final, Sequence

from src.linalg.domain.matrices import Matrix2, Matrix3, Matrix4, SquareMatrix
from src.linalg.math.numerical_safeguards import all_finite

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Порог |det|, ниже которого слой визуализации сообщает "слишком близко к нулю".
# Используется только в is_near_singular, но не в inverse().
SINGULARITY_REPORT_EPS: Final[float] = 1e-4


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class InverseResult:
    """Результат обращения матрицы."""

    # Сырой определитель (всегда заполнен, чтобы объяснить "почему")
    determinant: float

    # Обратная матрица или None, если обращение численно невозможно
    inverse: Matrix2 | Matrix3 | Matrix4 | None

    @property
    def is_invertible(self) -> bool:
        return self.inverse is not None


# =============================================================================
# ОПРЕДЕЛИТЕЛЬ
# =============================================================================


def _submatrix(rows: Sequence[Sequence[float]], row: int, col: int) -> list[list[float]]:
    """Строки без строки row и столбца col."""
    return [
        [value for j, value in enumerate(r) if j != col]
        for i, r in enumerate(rows)
        if i != row
    ]


def _det_rows(rows: Sequence[Sequence[float]]) -> float:
    size = len(rows)

    if size == 1:
        return rows[0][0]

    if size == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]

    if size == 3:
        a, b, c = rows[0]
        d, e, f = rows[1]
        g, h, i = rows[2]
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    # 4×4: разложение по первой строке на четыре минора 3×3
    total = 0.0
    for j in range(size):
        sign = 1.0 if j % 2 == 0 else -1.0
        total += sign * rows[0][j] * _det_rows(_submatrix(rows, 0, j))
    return total


def determinant(m: SquareMatrix) -> float:
    """
    Определитель матрицы 2×2, 3×3 или 4×4.

    Examples:
        >>> determinant(Matrix2.identity())
        1.0
        >>> determinant(Matrix2.from_rows([[2, 4], [1, 2]]))
        0.0
    """
    return _det_rows(m.rows)


def minor(m: SquareMatrix, row: int, col: int) -> float:
    """Минор M_ij: определитель матрицы без строки row и столбца col."""
    return _det_rows(_submatrix(m.rows, row, col))


def cofactor(m: SquareMatrix, row: int, col: int) -> float:
    """Алгебраическое дополнение C_ij = (−1)^(i+j) · M_ij."""
    sign = 1.0 if (row + col) % 2 == 0 else -1.0
    return sign * minor(m, row, col)


def adjugate(m: SquareMatrix):
    """
    Присоединённая матрица: транспонированная матрица алгебраических дополнений.

    adjugate[j][i] = cofactor(i, j)
    """
    n = m.size
    return type(m).from_rows([[cofactor(m, i, j) for i in range(n)] for j in range(n)])


def is_near_singular(det: float, threshold: float = SINGULARITY_REPORT_EPS) -> bool:
    """
    Проверка "определитель слишком близок к нулю" для отображения.

    Решение принимает вызывающий код; inverse() этот порог не использует.
    """
    return abs(det) < threshold


# =============================================================================
# ОБРАТНАЯ МАТРИЦА
# =============================================================================


def inverse(m: SquareMatrix) -> InverseResult:
    """
    Обратная матрица adjugate / det.

    Args:
        m: Matrix2, Matrix3 или Matrix4

    Returns:
        InverseResult:
            - determinant: сырой определитель
            - inverse: обратная матрица, или None если det == 0
              либо элемент результата не представим в float
    """
    det = determinant(m)

    if det == 0.0:
        logger.debug("Singular %s: determinant is exactly zero", type(m).__name__)
        return InverseResult(determinant=det, inverse=None)

    # Поэлементное деление: при субнормальном det значение 1/det переполняется
    adj = adjugate(m)
    entries = [[value / det for value in row] for row in adj.rows]

    if not all_finite(value for row in entries for value in row):
        logger.debug(
            "Inverse of %s overflowed for determinant %r", type(m).__name__, det
        )
        return InverseResult(determinant=det, inverse=None)

    return InverseResult(determinant=det, inverse=type(m).from_rows(entries))
