"""
EigenSolver — собственные значения и векторы 2×2 и 3×3

2×2 (аналитически):
    trace = a + d, det = ad − bc
    discriminant = trace² − 4·det = (a − d)² + 4bc
    disc ≥ 0 → λ = (trace ± √disc) / 2               (вещественные)
    disc < 0 → λ = (trace ± i·√(−disc)) / 2          (комплексно-сопряжённая пара)

    Вторая форма дискриминанта алгебраически тождественна первой, но не
    теряет точность на вычитании близких чисел: для симметричных матриц
    она неотрицательна точно, а не "почти".

3×3 (численно):
    Характеристический многочлен −λ³ + trace·λ² − minors·λ + det = 0,
    minors = сумма главных миноров 2×2. Один вещественный корень ищется
    методом Ньютона от trace/3, защищённым интервалом Коши [−R, R]
    (бисекция, если шаг Ньютона выходит из интервала или производная
    обращается в ноль). Затем многочлен делится на (λ − λ₁), оставшийся
    квадратный трёхчлен решается по формуле корней; отрицательный
    дискриминант означает комплексно-сопряжённую пару.

Собственные векторы (только для вещественных λ):
    2×2: нуль-вектор доминирующей строки (M − λI): (−b, a−λ) или (d−λ, −c)
    3×3: наибольшее векторное произведение двух строк (M − λI)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Решатель никогда не бросает исключений для поддерживаемой матрицы:
   недостающие векторы возвращаются как None
2. Итерация ограничена max_iterations (бесконечных циклов нет)
3. При несходимости возвращается лучшее приближение с converged=False
"""

import logging
import math
import sys
from dataclasses import dataclass

from src.linalg.domain.eigen import Complex, EigenDecomposition, EigenPair
from src.linalg.domain.errors import DimensionMismatchError
from src.linalg.domain.matrices import Matrix2, Matrix3, SquareMatrix
from src.linalg.domain.vectors import Vector2, Vector3
from src.linalg.math.numerical_safeguards import EPS_PIVOT, max_abs
from src.linalg.math.vector_ops import cross, magnitude

logger = logging.getLogger(__name__)

# Множитель оценки ошибки округления при вычислении кубического многочлена
_ROUNDING_FACTOR: float = 8.0 * sys.float_info.epsilon


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EigenSolverConfig:
    """Конфигурация решателя.

    Значения по умолчанию подходят для матриц с элементами порядка 1e-3..1e3.
    """

    # Ньютон для 3×3
    max_iterations: int = 100
    tolerance: float = 1e-12  # |Δλ| ≤ tol·(|λ| + min(1, масштаб корней))

    # Порог вырожденности (M − λI), относительно масштаба матрицы
    null_space_eps: float = EPS_PIVOT

    # |дискриминант| меньше этого (относительно) считается нулём: кратный корень
    discriminant_eps: float = 1e-12

    # Шаги уточнения корней квадратного трёхчлена по полному многочлену
    polish_iterations: int = 4

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.null_space_eps < 0 or self.discriminant_eps < 0:
            raise ValueError("null_space_eps and discriminant_eps must be non-negative")
        if self.polish_iterations < 0:
            raise ValueError(
                f"polish_iterations must be non-negative, got {self.polish_iterations}"
            )


DEFAULT_CONFIG = EigenSolverConfig()


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def _canonical_sign(components: list[float]) -> list[float]:
    """Знак выбирается так, чтобы наибольшая по модулю компонента была положительной."""
    dominant = max(components, key=abs)
    if dominant < 0:
        return [-c for c in components]
    return components


def _unit(components: list[float]) -> list[float]:
    length = math.hypot(*components)
    return _canonical_sign([c / length for c in components])


def _quadratic_roots(
    p: float, q: float, discriminant_eps: float
) -> tuple[Complex, Complex]:
    """Корни λ² + pλ + q = 0 (первым идёт корень со знаком '+')."""
    disc = p * p - 4.0 * q

    # Шум округления у кратного корня (любого знака) считаем нулём
    if abs(disc) <= discriminant_eps * max(p * p, abs(q)):
        disc = 0.0

    if disc < 0:
        real = -p / 2.0
        imag = math.sqrt(-disc) / 2.0
        return Complex.from_parts(real, imag), Complex.from_parts(real, -imag)

    sqrt_disc = math.sqrt(disc)
    return Complex.from_real((-p + sqrt_disc) / 2.0), Complex.from_real((-p - sqrt_disc) / 2.0)


# =============================================================================
# 2×2
# =============================================================================


def eigenvalues_2x2(m: Matrix2) -> tuple[Complex, Complex]:
    """
    Собственные значения матрицы 2×2 по формуле корней.

    Returns:
        (λ₊, λ₋) для вещественного случая;
        (re + i·im, re − i·im) с is_complex=True для комплексного

    Examples:
        >>> [c.real for c in eigenvalues_2x2(Matrix2.from_rows([[2, 0], [0, 3]]))]
        [3.0, 2.0]
    """
    a, b = m.rows[0]
    c, d = m.rows[1]

    trace = a + d
    discriminant = (a - d) * (a - d) + 4.0 * b * c

    if discriminant < 0:
        real = trace / 2.0
        imag = math.sqrt(-discriminant) / 2.0
        return Complex.from_parts(real, imag), Complex.from_parts(real, -imag)

    sqrt_disc = math.sqrt(discriminant)
    return (
        Complex.from_real((trace + sqrt_disc) / 2.0),
        Complex.from_real((trace - sqrt_disc) / 2.0),
    )


def eigenvector_2x2(
    m: Matrix2,
    eigenvalue: Complex,
    config: EigenSolverConfig = DEFAULT_CONFIG,
) -> Vector2 | None:
    """
    Единичный собственный вектор для вещественного λ.

    Решает (M − λI)v = 0 по доминирующей (наибольшей по норме) строке:
        строка 0 (a−λ, b) → v = (−b, a−λ)
        строка 1 (c, d−λ) → v = (d−λ, −c)

    Returns:
        Vector2, или None если λ комплексное либо обе строки (M − λI)
        нулевые (M = λI: любой вектор собственный, выбор неоднозначен)
    """
    if eigenvalue.is_complex:
        return None

    lam = eigenvalue.real
    a = m.rows[0][0] - lam
    b = m.rows[0][1]
    c = m.rows[1][0]
    d = m.rows[1][1] - lam

    scale = max(max_abs(m.entries()), abs(lam))
    norm_row0 = math.hypot(a, b)
    norm_row1 = math.hypot(c, d)

    if max(norm_row0, norm_row1) <= config.null_space_eps * scale:
        return None

    if norm_row0 >= norm_row1:
        components = [-b, a]
    else:
        components = [d, -c]

    return Vector2.from_components(_unit(components))


def eigen_2x2(m: Matrix2, config: EigenSolverConfig = DEFAULT_CONFIG) -> EigenDecomposition:
    """Полное разложение 2×2: значения и векторы."""
    pairs = tuple(
        EigenPair(eigenvalue=value, eigenvector=eigenvector_2x2(m, value, config))
        for value in eigenvalues_2x2(m)
    )
    return EigenDecomposition(pairs=pairs, converged=True, iterations=0)


# =============================================================================
# 3×3
# =============================================================================


def characteristic_coefficients(m: Matrix3) -> tuple[float, float, float]:
    """
    Коэффициенты характеристического многочлена 3×3.

    −λ³ + trace·λ² − minors·λ + det = 0

    Returns:
        (trace, minors, det), minors = сумма главных миноров 2×2
    """
    a, b, c = m.rows[0]
    d, e, f = m.rows[1]
    g, h, i = m.rows[2]

    trace = a + e + i
    minors = (a * e - b * d) + (a * i - c * g) + (e * i - f * h)
    det = a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)
    return trace, minors, det


def _cubic(x: float, trace: float, minors: float, det: float) -> float:
    # Монический вид: λ³ − trace·λ² + minors·λ − det (схема Горнера)
    return ((x - trace) * x + minors) * x - det


def _cubic_derivative(x: float, trace: float, minors: float) -> float:
    return (3.0 * x - 2.0 * trace) * x + minors


def _cubic_noise(x: float, trace: float, minors: float, det: float) -> float:
    """Оценка ошибки округления при вычислении _cubic в точке x."""
    ax = abs(x)
    return _ROUNDING_FACTOR * (((ax + abs(trace)) * ax + abs(minors)) * ax + abs(det))


def _newton_real_root(
    trace: float,
    minors: float,
    det: float,
    config: EigenSolverConfig,
) -> tuple[float, bool, int]:
    """
    Один вещественный корень монического кубического многочлена.

    Ньютон от trace/3 внутри интервала [lo, hi] с q(lo) < 0 < q(hi).
    Начальный интервал — граница Коши R = 1 + max(|коэффициентов|).

    Returns:
        (root, converged, iterations)
    """
    bound = 1.0 + max(abs(trace), abs(minors), abs(det))
    lo, hi = -bound, bound
    x = trace / 3.0

    # Для малых матриц критерий сходимости становится относительным
    root_scale = min(1.0, max(abs(trace), math.sqrt(abs(minors)), abs(det) ** (1.0 / 3.0)))

    for iteration in range(1, config.max_iterations + 1):
        fx = _cubic(x, trace, minors, det)

        # Значение неотличимо от нуля на фоне округления
        if abs(fx) <= _cubic_noise(x, trace, minors, det):
            return x, True, iteration

        if fx < 0:
            lo = x
        else:
            hi = x

        dfx = _cubic_derivative(x, trace, minors)
        x_next = x - fx / dfx if dfx != 0.0 else math.nan
        if not (lo < x_next < hi):
            # Шаг Ньютона ненадёжен: бисекция
            x_next = 0.5 * (lo + hi)

        step = abs(x_next - x)
        x = x_next

        tol = config.tolerance * (abs(x) + root_scale)
        if step <= tol or (hi - lo) <= tol:
            return x, True, iteration

    return x, False, config.max_iterations


def _polish_root(
    x: float, trace: float, minors: float, det: float, iterations: int
) -> float:
    """Уточнение корня шагами Ньютона; шаг принимается, только если невязка убывает."""
    residual = abs(_cubic(x, trace, minors, det))
    for _ in range(iterations):
        if residual == 0.0:
            break
        dfx = _cubic_derivative(x, trace, minors)
        if dfx == 0.0:
            break
        candidate = x - _cubic(x, trace, minors, det) / dfx
        candidate_residual = abs(_cubic(candidate, trace, minors, det))
        if not candidate_residual < residual:
            break
        x, residual = candidate, candidate_residual
    return x


def eigenvalues_3x3(
    m: Matrix3,
    config: EigenSolverConfig = DEFAULT_CONFIG,
) -> tuple[tuple[Complex, Complex, Complex], bool, int]:
    """
    Собственные значения матрицы 3×3.

    Порядок результата:
        - все вещественные: по убыванию
        - есть комплексная пара: вещественный корень, затем re + i·im, re − i·im

    Returns:
        (eigenvalues, converged, iterations)
    """
    trace, minors, det = characteristic_coefficients(m)

    root, converged, iterations = _newton_real_root(trace, minors, det, config)

    # Деление на (λ − root): λ³ − tλ² + sλ − d = (λ − root)(λ² + pλ + q)
    p = root - trace
    q = minors + root * p

    first, second = _quadratic_roots(p, q, config.discriminant_eps)

    if first.is_complex:
        values = (Complex.from_real(root), first, second)
    else:
        polished = [
            _polish_root(v.real, trace, minors, det, config.polish_iterations)
            for v in (first, second)
        ]
        reals = sorted([root, *polished], reverse=True)
        values = tuple(Complex.from_real(v) for v in reals)

    if not converged:
        logger.warning(
            "3x3 eigenvalue iteration did not converge after %d iterations "
            "(best root %r); returning best approximation",
            iterations,
            root,
        )
    else:
        logger.debug("3x3 eigenvalue iteration converged in %d iterations", iterations)

    return values, converged, iterations


def eigenvector_3x3(
    m: Matrix3,
    eigenvalue: Complex,
    config: EigenSolverConfig = DEFAULT_CONFIG,
) -> Vector3 | None:
    """
    Единичный собственный вектор для вещественного λ.

    Для системы ранга 2 векторное произведение двух независимых строк
    (M − λI) лежит в её ядре. Берётся наибольшее из трёх произведений.

    Returns:
        Vector3, или None если λ комплексное либо ранг (M − λI) ≤ 1
        (собственное подпространство размерности ≥ 2)
    """
    if eigenvalue.is_complex:
        return None

    lam = eigenvalue.real
    shifted = [
        Vector3.from_components([value - lam if i == j else value for j, value in enumerate(row)])
        for i, row in enumerate(m.rows)
    ]

    candidates = [
        cross(shifted[0], shifted[1]),
        cross(shifted[0], shifted[2]),
        cross(shifted[1], shifted[2]),
    ]
    best = max(candidates, key=magnitude)

    scale = max(max_abs(m.entries()), abs(lam))
    if magnitude(best) <= config.null_space_eps * scale * scale:
        return None

    return Vector3.from_components(_unit(list(best.components())))


def eigen_3x3(m: Matrix3, config: EigenSolverConfig = DEFAULT_CONFIG) -> EigenDecomposition:
    """Полное разложение 3×3: значения, векторы и диагностика итерации."""
    values, converged, iterations = eigenvalues_3x3(m, config)
    pairs = tuple(
        EigenPair(eigenvalue=value, eigenvector=eigenvector_3x3(m, value, config))
        for value in values
    )
    return EigenDecomposition(pairs=pairs, converged=converged, iterations=iterations)


# =============================================================================
# DISPATCH
# =============================================================================


def eigen_decomposition(
    m: SquareMatrix,
    config: EigenSolverConfig | None = None,
) -> EigenDecomposition:
    """
    Разложение для Matrix2 или Matrix3.

    Raises:
        DimensionMismatchError: Для других размеров (4×4 не поддерживается)
    """
    config = config or DEFAULT_CONFIG

    if isinstance(m, Matrix2):
        return eigen_2x2(m, config)
    if isinstance(m, Matrix3):
        return eigen_3x3(m, config)

    raise DimensionMismatchError(
        f"Eigen decomposition is defined for Matrix2 and Matrix3, got {type(m).__name__}"
    )
