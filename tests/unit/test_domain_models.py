"""
Тесты для Pydantic моделей ядра

Проверяет:
1. Неизменяемость (frozen=True) векторов, кватерниона и матриц
2. Проверку формы матриц при создании
3. Диспетчеризацию по размеру (vector_from_components, matrix_from_rows)
4. Сериализацию Complex в формат {real, imag, isComplex}
5. EigenDecomposition помощники
"""

import pytest
from pydantic import ValidationError

from src.linalg.domain import (
    Complex,
    DimensionMismatchError,
    EigenDecomposition,
    EigenPair,
    Matrix2,
    Matrix3,
    Matrix4,
    Quaternion,
    Vector2,
    Vector3,
    Vector4,
    ZeroVectorError,
    matrix_class_for_size,
    matrix_from_rows,
    vector_from_components,
)


# =============================================================================
# ВЕКТОРЫ
# =============================================================================


class TestVectors:
    """Тесты Vector2 / Vector3 / Vector4"""

    def test_vector_is_frozen(self) -> None:
        v = Vector2(x=1.0, y=2.0)
        with pytest.raises(ValidationError):
            v.x = 5.0

    def test_extra_component_rejected(self) -> None:
        """{x, y, z} не может молча стать Vector2"""
        with pytest.raises(ValidationError):
            Vector2(x=1.0, y=2.0, z=3.0)

    def test_missing_component_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Vector3(x=1.0, y=2.0)

    def test_equality_is_componentwise(self) -> None:
        assert Vector3(x=1, y=2, z=3) == Vector3(x=1.0, y=2.0, z=3.0)
        assert Vector3(x=1, y=2, z=3) != Vector3(x=1, y=2, z=4)

    def test_components_order(self) -> None:
        assert Vector4(x=1, y=2, z=3, w=4).components() == (1.0, 2.0, 3.0, 4.0)
        assert Vector3(x=1, y=2, z=3).size == 3

    def test_from_components(self) -> None:
        assert Vector3.from_components([1, 2, 3]) == Vector3(x=1, y=2, z=3)

    def test_from_components_wrong_length(self) -> None:
        with pytest.raises(DimensionMismatchError, match="Vector2 expects 2 components"):
            Vector2.from_components([1, 2, 3])

    @pytest.mark.parametrize(
        "values,expected_cls",
        [([1, 2], Vector2), ([1, 2, 3], Vector3), ([1, 2, 3, 4], Vector4)],
    )
    def test_vector_from_components_dispatch(self, values, expected_cls) -> None:
        assert type(vector_from_components(values)) is expected_cls

    def test_vector_from_components_unsupported(self) -> None:
        with pytest.raises(DimensionMismatchError, match="Unsupported vector size 5"):
            vector_from_components([1, 2, 3, 4, 5])


# =============================================================================
# КВАТЕРНИОН
# =============================================================================


class TestQuaternion:
    """Тесты Quaternion"""

    def test_identity(self) -> None:
        q = Quaternion.identity()
        assert (q.w, q.x, q.y, q.z) == (1.0, 0.0, 0.0, 0.0)
        assert q.norm() == 1.0

    def test_normalized(self) -> None:
        q = Quaternion(w=2.0, x=0.0, y=0.0, z=0.0).normalized()
        assert q == Quaternion.identity()

    def test_normalized_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Quaternion(w=0, x=0, y=0, z=0).normalized()

    def test_not_normalized_on_construction(self) -> None:
        """Ядро не нормализует кватернион само"""
        assert Quaternion(w=2, x=0, y=0, z=0).norm() == 2.0


# =============================================================================
# МАТРИЦЫ
# =============================================================================


class TestMatrices:
    """Тесты Matrix2 / Matrix3 / Matrix4"""

    def test_identity_and_zeros(self) -> None:
        assert Matrix2.identity().to_list() == [[1.0, 0.0], [0.0, 1.0]]
        assert Matrix3.zeros().entries() == (0.0,) * 9

    def test_row_major_indexing(self) -> None:
        m = Matrix2.from_rows([[1, 2], [3, 4]])
        assert m[0][1] == 2.0
        assert m[1][0] == 3.0
        assert m.column(1) == (2.0, 4.0)

    def test_matrix_is_frozen(self) -> None:
        m = Matrix2.identity()
        with pytest.raises(ValidationError):
            m.rows = ((0.0, 0.0), (0.0, 0.0))

    def test_wrong_row_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Matrix3.from_rows([[1, 0, 0], [0, 1, 0]])

    def test_ragged_row_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Matrix2.from_rows([[1, 0], [0, 1, 0]])

    def test_matrix_class_for_size(self) -> None:
        assert matrix_class_for_size(4) is Matrix4
        with pytest.raises(DimensionMismatchError):
            matrix_class_for_size(5)

    def test_matrix_from_rows_dispatch(self) -> None:
        assert type(matrix_from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])) is Matrix3

    def test_matrix_from_rows_non_square(self) -> None:
        with pytest.raises(DimensionMismatchError, match="must be square"):
            matrix_from_rows([[1, 2, 3], [4, 5, 6]])


# =============================================================================
# EIGEN МОДЕЛИ
# =============================================================================


class TestEigenModels:
    """Тесты Complex / EigenPair / EigenDecomposition"""

    def test_complex_serializes_with_camel_case_flag(self) -> None:
        c = Complex.from_parts(0.0, 1.0)
        assert c.model_dump(by_alias=True) == {"real": 0.0, "imag": 1.0, "isComplex": True}

    def test_complex_accepts_both_flag_names(self) -> None:
        assert Complex(real=1.0, isComplex=True).is_complex
        assert Complex(real=1.0, is_complex=True).is_complex

    def test_complex_from_real(self) -> None:
        c = Complex.from_real(3.0)
        assert c.imag == 0.0
        assert not c.is_complex
        assert complex(c) == 3 + 0j

    def test_conjugate(self) -> None:
        assert Complex.from_parts(1.0, 2.0).conjugate() == Complex.from_parts(1.0, -2.0)

    def test_eigen_pair_keeps_vector_dimension(self) -> None:
        """Vector3 payload не превращается в Vector2 при валидации union"""
        pair = EigenPair(eigenvalue=Complex.from_real(1.0), eigenvector={"x": 0, "y": 0, "z": 1})
        assert isinstance(pair.eigenvector, Vector3)

    def test_decomposition_helpers(self) -> None:
        result = EigenDecomposition(
            pairs=(
                EigenPair(eigenvalue=Complex.from_real(1.0), eigenvector=Vector3(x=1, y=0, z=0)),
                EigenPair(eigenvalue=Complex.from_parts(0.0, 1.0)),
                EigenPair(eigenvalue=Complex.from_parts(0.0, -1.0)),
            ),
            converged=True,
            iterations=3,
        )
        assert result.has_complex
        assert result.real_eigenvalues == (1.0,)
        assert [c.imag for c in result.eigenvalues] == [0.0, 1.0, -1.0]


# =============================================================================
# ИСКЛЮЧЕНИЯ
# =============================================================================


class TestErrors:
    """Иерархия исключений"""

    def test_dimension_mismatch_is_value_error(self) -> None:
        assert issubclass(DimensionMismatchError, ValueError)

    def test_zero_vector_is_zero_division(self) -> None:
        assert issubclass(ZeroVectorError, ZeroDivisionError)
