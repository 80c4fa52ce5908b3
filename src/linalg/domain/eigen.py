"""
Eigen — модели собственных значений и векторов

- Complex: собственное значение (вещественное или из комплексно-сопряжённой пары)
- EigenPair: собственное значение + собственный вектор (или None)
- EigenDecomposition: результат решателя с признаком сходимости

Complex сериализуется в формат слоя визуализации {real, imag, isComplex}.
"""

from dataclasses import dataclass

from pydantic import AliasChoices, BaseModel, Field

from src.linalg.domain.vectors import Vector2, Vector3


# =============================================================================
# MODELS
# =============================================================================


class Complex(BaseModel):
    """
    Собственное значение.

    is_complex=True только для членов комплексно-сопряжённой пары,
    у вещественных значений imag == 0.0.
    """

    real: float = Field(..., description="Вещественная часть")
    imag: float = Field(0.0, description="Мнимая часть")
    is_complex: bool = Field(
        False,
        validation_alias=AliasChoices("is_complex", "isComplex"),
        serialization_alias="isComplex",
        description="Член комплексно-сопряжённой пары",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_real(cls, value: float) -> "Complex":
        return cls(real=value, imag=0.0, is_complex=False)

    @classmethod
    def from_parts(cls, real: float, imag: float) -> "Complex":
        return cls(real=real, imag=imag, is_complex=True)

    def conjugate(self) -> "Complex":
        return Complex(real=self.real, imag=-self.imag, is_complex=self.is_complex)

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)


class EigenPair(BaseModel):
    """
    Пара (собственное значение, собственный вектор).

    eigenvector равен None, когда осмысленный вещественный вектор
    восстановить нельзя: комплексное значение или собственное
    подпространство размерности ≥ 2 (вектор неоднозначен).
    """

    eigenvalue: Complex
    eigenvector: Vector2 | Vector3 | None = None

    model_config = {"frozen": True}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EigenDecomposition:
    """Результат решателя собственных значений."""

    pairs: tuple[EigenPair, ...]

    # Диагностика итерации (для 2×2 всегда converged=True, iterations=0)
    converged: bool
    iterations: int

    @property
    def eigenvalues(self) -> tuple[Complex, ...]:
        return tuple(pair.eigenvalue for pair in self.pairs)

    @property
    def real_eigenvalues(self) -> tuple[float, ...]:
        return tuple(p.eigenvalue.real for p in self.pairs if not p.eigenvalue.is_complex)

    @property
    def has_complex(self) -> bool:
        return any(pair.eigenvalue.is_complex for pair in self.pairs)
