"""
Тесты для модуля Rank

Проверяет:
1. Полный ранг невырожденных матриц
2. Понижение ранга дублирующимися/пропорциональными строками
3. Нулевую матрицу
4. Один и тот же путь для 2×2, 3×3, 4×4
"""

import pytest

from src.linalg.domain import Matrix2, Matrix3, Matrix4
from src.linalg.math.rank import matrix_rank


class TestMatrixRank:
    """Тесты matrix_rank"""

    @pytest.mark.parametrize("matrix_cls", [Matrix2, Matrix3, Matrix4])
    def test_identity_full_rank(self, matrix_cls) -> None:
        assert matrix_rank(matrix_cls.identity()) == matrix_cls.size

    @pytest.mark.parametrize("matrix_cls", [Matrix2, Matrix3, Matrix4])
    def test_zero_matrix(self, matrix_cls) -> None:
        assert matrix_rank(matrix_cls.zeros()) == 0

    def test_proportional_rows_2x2(self) -> None:
        assert matrix_rank(Matrix2.from_rows([[1, 2], [2, 4]])) == 1

    def test_duplicate_rows_3x3(self) -> None:
        assert matrix_rank(Matrix3.from_rows([[1, 2, 3], [1, 2, 3], [0, 1, 1]])) == 2

    def test_classic_rank_two(self) -> None:
        """[[1,2,3],[4,5,6],[7,8,9]]: третья строка — комбинация первых двух"""
        assert matrix_rank(Matrix3.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])) == 2

    def test_4x4_rank_one(self) -> None:
        m = Matrix4.from_rows([[1, 2, 3, 4], [2, 4, 6, 8], [-1, -2, -3, -4], [0, 0, 0, 0]])
        assert matrix_rank(m) == 1

    def test_4x4_full_rank(self) -> None:
        m = Matrix4.from_rows([[1, 0, 2, -1], [3, 0, 0, 5], [2, 1, 4, -3], [1, 0, 5, 0]])
        assert matrix_rank(m) == 4

    def test_pivot_in_later_column(self) -> None:
        """Первый столбец нулевой: пивот ищется в следующем"""
        assert matrix_rank(Matrix3.from_rows([[0, 1, 2], [0, 2, 4], [0, 0, 1]])) == 2

    def test_rank_never_exceeds_size(self) -> None:
        m = Matrix3.from_rows([[3, 1, 4], [1, 5, 9], [2, 6, 5]])
        assert 0 <= matrix_rank(m) <= 3

    def test_input_not_mutated(self) -> None:
        m = Matrix3.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        matrix_rank(m)
        assert m.to_list() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]

    def test_tolerance_controls_small_pivots(self) -> None:
        m = Matrix2.from_rows([[1.0, 0.0], [0.0, 1e-12]])
        assert matrix_rank(m) == 1
        assert matrix_rank(m, tol=0.0) == 2

    def test_negative_tolerance_rejected(self) -> None:
        with pytest.raises(ValueError, match="tol must be non-negative"):
            matrix_rank(Matrix2.identity(), tol=-1.0)
