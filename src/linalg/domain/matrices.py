"""
Matrices — неизменяемые квадратные матрицы 2×2, 3×3, 4×4

Immutable Pydantic модели (frozen=True). Хранение row-major: m[row][col].
Форма проверяется при создании: кортеж фиксированной длины из строк
фиксированной длины, поэтому матрица всегда полностью заполнена и
"неправильный размер" невозможно передать дальше в ядро.

Каждая операция ядра возвращает новую матрицу, входы не мутируются.
"""

from typing import ClassVar, Sequence

from pydantic import BaseModel

from src.linalg.domain.errors import DimensionMismatchError

Row2 = tuple[float, float]
Row3 = tuple[float, float, float]
Row4 = tuple[float, float, float, float]


# =============================================================================
# BASE
# =============================================================================


class SquareMatrix(BaseModel):
    """
    Общая часть квадратных матриц фиксированного размера.

    Подклассы задают размер (size) и тип поля rows.
    """

    size: ClassVar[int] = 0

    rows: tuple[tuple[float, ...], ...]

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]):
        """Создание из любой последовательности строк (списки, кортежи)."""
        return cls(rows=tuple(tuple(row) for row in rows))

    @classmethod
    def identity(cls):
        """Единичная матрица."""
        n = cls.size
        return cls.from_rows([[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)])

    @classmethod
    def zeros(cls):
        """Нулевая матрица."""
        n = cls.size
        return cls.from_rows([[0.0] * n for _ in range(n)])

    def __getitem__(self, row: int) -> tuple[float, ...]:
        return self.rows[row]

    def column(self, col: int) -> tuple[float, ...]:
        """Столбец col."""
        return tuple(row[col] for row in self.rows)

    def entries(self) -> tuple[float, ...]:
        """Все элементы построчно."""
        return tuple(value for row in self.rows for value in row)

    def to_list(self) -> list[list[float]]:
        """Массив массивов (формат слоя визуализации)."""
        return [list(row) for row in self.rows]


# =============================================================================
# MATRIX MODELS
# =============================================================================


class Matrix2(SquareMatrix):
    """Матрица 2×2."""

    size: ClassVar[int] = 2

    rows: tuple[Row2, Row2]


class Matrix3(SquareMatrix):
    """Матрица 3×3 (линейное преобразование R³ или однородное 2D)."""

    size: ClassVar[int] = 3

    rows: tuple[Row3, Row3, Row3]


class Matrix4(SquareMatrix):
    """Матрица 4×4 (однородное 3D преобразование или проекция)."""

    size: ClassVar[int] = 4

    rows: tuple[Row4, Row4, Row4, Row4]


_MATRIX_BY_SIZE: dict[int, type[SquareMatrix]] = {2: Matrix2, 3: Matrix3, 4: Matrix4}


def matrix_class_for_size(size: int) -> type[SquareMatrix]:
    """
    Класс матрицы для размера.

    Raises:
        DimensionMismatchError: Если размер не 2, 3 или 4
    """
    matrix_cls = _MATRIX_BY_SIZE.get(size)
    if matrix_cls is None:
        raise DimensionMismatchError(
            f"Unsupported matrix size {size}; expected 2, 3 or 4"
        )
    return matrix_cls


def matrix_from_rows(rows: Sequence[Sequence[float]]) -> Matrix2 | Matrix3 | Matrix4:
    """
    Создание матрицы подходящего размера из массива массивов.

    Args:
        rows: Квадратный массив размера 2, 3 или 4

    Returns:
        Matrix2, Matrix3 или Matrix4

    Raises:
        DimensionMismatchError: Если массив не квадратный или размер не поддерживается
    """
    size = len(rows)
    matrix_cls = matrix_class_for_size(size)

    for index, row in enumerate(rows):
        if len(row) != size:
            raise DimensionMismatchError(
                f"Matrix must be square: row {index} has {len(row)} entries, expected {size}"
            )

    return matrix_cls.from_rows(rows)
