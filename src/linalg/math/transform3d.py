"""
Transform3D — построители аффинных преобразований и проекций

Модуль строит:
- Повороты вокруг осей X/Y/Z (3×3) и их композицию Rz·Ry·Rx
- Однородные 4×4 матрицы переноса, масштаба и отражения
- Матрицу поворота из кватерниона и кватернион из углов Эйлера
- Видовую матрицу камеры (look-at)
- Перспективную и ортографическую проекции (соглашение OpenGL, clip-space)

Соглашения:
- Углы в радианах, правая система координат, векторы-столбцы (M·v)
- Композиция Эйлера: Rz · Ry · Rx (первым применяется поворот вокруг X)
- Кватернион НЕ нормализуется: единичная норма — предусловие вызывающего кода
- perspective() не выполняет деление на w; для этого есть project_point()
"""

import math

from src.linalg.domain.errors import ZeroVectorError
from src.linalg.domain.matrices import Matrix3, Matrix4
from src.linalg.domain.vectors import Quaternion, Vector3, Vector4
from src.linalg.math.matrix_ops import apply_to_vector, compose
from src.linalg.math.numerical_safeguards import validate_finite, validate_non_zero
from src.linalg.math.vector_ops import cross, dot, normalize, subtract


# =============================================================================
# ПОВОРОТЫ
# =============================================================================


def rotation_x(angle: float) -> Matrix3:
    """Поворот вокруг оси X на angle радиан."""
    validate_finite(angle, "angle")
    cos, sin = math.cos(angle), math.sin(angle)
    return Matrix3.from_rows([[1, 0, 0], [0, cos, -sin], [0, sin, cos]])


def rotation_y(angle: float) -> Matrix3:
    """Поворот вокруг оси Y на angle радиан."""
    validate_finite(angle, "angle")
    cos, sin = math.cos(angle), math.sin(angle)
    return Matrix3.from_rows([[cos, 0, sin], [0, 1, 0], [-sin, 0, cos]])


def rotation_z(angle: float) -> Matrix3:
    """Поворот вокруг оси Z на angle радиан."""
    validate_finite(angle, "angle")
    cos, sin = math.cos(angle), math.sin(angle)
    return Matrix3.from_rows([[cos, -sin, 0], [sin, cos, 0], [0, 0, 1]])


def euler_rotation(rx: float, ry: float, rz: float) -> Matrix3:
    """
    Композиция поворотов Rz · Ry · Rx.

    Применённая к вектору, сначала поворачивает вокруг X, затем Y, затем Z.
    """
    return compose(rotation_z(rz), rotation_y(ry), rotation_x(rx))


def to_homogeneous(m: Matrix3) -> Matrix4:
    """Вложение линейной части 3×3 в однородную 4×4 (без переноса)."""
    rows = [list(row) + [0.0] for row in m.rows]
    rows.append([0.0, 0.0, 0.0, 1.0])
    return Matrix4.from_rows(rows)


# =============================================================================
# ПЕРЕНОС, МАСШТАБ, ОТРАЖЕНИЕ
# =============================================================================


def translation_matrix(tx: float, ty: float, tz: float) -> Matrix4:
    """Однородная матрица переноса."""
    return Matrix4.from_rows(
        [
            [1, 0, 0, tx],
            [0, 1, 0, ty],
            [0, 0, 1, tz],
            [0, 0, 0, 1],
        ]
    )


def scale_matrix(sx: float, sy: float, sz: float) -> Matrix4:
    """Однородная матрица масштаба."""
    return Matrix4.from_rows(
        [
            [sx, 0, 0, 0],
            [0, sy, 0, 0],
            [0, 0, sz, 0],
            [0, 0, 0, 1],
        ]
    )


def scale_matrix3(sx: float, sy: float, sz: float) -> Matrix3:
    """Линейная матрица масштаба 3×3."""
    return Matrix3.from_rows([[sx, 0, 0], [0, sy, 0], [0, 0, sz]])


_REFLECTION_DIAGONALS: dict[str, tuple[float, float]] = {
    "x": (1.0, -1.0),  # относительно оси X: y → −y
    "y": (-1.0, 1.0),  # относительно оси Y: x → −x
    "origin": (-1.0, -1.0),  # относительно начала координат
}


def reflection_matrix(axis: str) -> Matrix4:
    """
    Однородная матрица отражения в плоскости XY.

    Args:
        axis: "x", "y", "origin" или "diagonal" (прямая y = x)

    Raises:
        ValueError: Если ось неизвестна
    """
    if axis == "diagonal":
        return Matrix4.from_rows(
            [
                [0, 1, 0, 0],
                [1, 0, 0, 0],
                [0, 0, 1, 0],
                [0, 0, 0, 1],
            ]
        )

    if axis not in _REFLECTION_DIAGONALS:
        raise ValueError(
            f"Unknown reflection axis {axis!r}; expected 'x', 'y', 'origin' or 'diagonal'"
        )

    fx, fy = _REFLECTION_DIAGONALS[axis]
    return scale_matrix(fx, fy, 1.0)


# =============================================================================
# КВАТЕРНИОНЫ
# =============================================================================


def quaternion_to_matrix(q: Quaternion) -> Matrix3:
    """
    Матрица поворота из кватерниона (стандартная формула).

    Предусловие: q единичный. Ненормированный q даёт матрицу, которая
    дополнительно масштабирует и искажает; ядро это не исправляет.
    """
    w, x, y, z = q.w, q.x, q.y, q.z
    return Matrix3.from_rows(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
    )


def euler_to_quaternion(rx: float, ry: float, rz: float) -> Quaternion:
    """
    Кватернион для поворота Rz · Ry · Rx (та же композиция, что euler_rotation).

    quaternion_to_matrix(euler_to_quaternion(rx, ry, rz)) ≈ euler_rotation(rx, ry, rz)
    """
    cx, sx = math.cos(rx / 2), math.sin(rx / 2)
    cy, sy = math.cos(ry / 2), math.sin(ry / 2)
    cz, sz = math.cos(rz / 2), math.sin(rz / 2)

    return Quaternion(
        w=cx * cy * cz + sx * sy * sz,
        x=sx * cy * cz - cx * sy * sz,
        y=cx * sy * cz + sx * cy * sz,
        z=cx * cy * sz - sx * sy * cz,
    )


# =============================================================================
# КАМЕРА
# =============================================================================


def look_at(eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
    """
    Видовая матрица камеры (world → view).

    Ортонормированный базис по Граму–Шмидту:
        forward = normalize(target − eye)
        right   = normalize(forward × up)
        up'     = right × forward

    Камера смотрит вдоль −Z в пространстве вида.

    Raises:
        ZeroVectorError: Если eye == target или up параллелен направлению взгляда
    """
    try:
        forward = normalize(subtract(target, eye))
    except ZeroVectorError as e:
        raise ZeroVectorError("look_at: eye and target coincide") from e

    try:
        right = normalize(cross(forward, up))
    except ZeroVectorError as e:
        raise ZeroVectorError("look_at: up is parallel to the viewing direction") from e

    true_up = cross(right, forward)

    return Matrix4.from_rows(
        [
            [right.x, right.y, right.z, -dot(right, eye)],
            [true_up.x, true_up.y, true_up.z, -dot(true_up, eye)],
            [-forward.x, -forward.y, -forward.z, dot(forward, eye)],
            [0, 0, 0, 1],
        ]
    )


# =============================================================================
# ПРОЕКЦИИ
# =============================================================================


def perspective(fov: float, aspect: float, near: float, far: float) -> Matrix4:
    """
    Перспективная проекция (вертикальный угол обзора fov в радианах).

    Результат — clip-space координаты; перспективное деление на w
    выполняет вызывающий код (или project_point).

    Raises:
        ValueError: Если aspect == 0, near == far или tan(fov/2) == 0
    """
    validate_finite(fov, "fov")
    validate_non_zero(aspect, "aspect")
    validate_finite(near, "near")
    validate_finite(far, "far")
    if near == far:
        raise ValueError(f"near and far must differ, got near=far={near}")

    tan_half = math.tan(fov / 2.0)
    if tan_half == 0.0:
        raise ValueError(f"fov must not be a multiple of 2π, got {fov}")

    f = 1.0 / tan_half
    range_inv = 1.0 / (near - far)

    return Matrix4.from_rows(
        [
            [f / aspect, 0, 0, 0],
            [0, f, 0, 0],
            [0, 0, (near + far) * range_inv, 2 * near * far * range_inv],
            [0, 0, -1, 0],
        ]
    )


def orthographic(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Matrix4:
    """
    Ортографическая проекция бокса [left, right] × [bottom, top] × [near, far] в куб [−1, 1]³.

    Raises:
        ValueError: Если бокс вырожден по любой оси
    """
    for name, value in (
        ("left", left),
        ("right", right),
        ("bottom", bottom),
        ("top", top),
        ("near", near),
        ("far", far),
    ):
        validate_finite(value, name)
    if left == right or bottom == top or near == far:
        raise ValueError(
            "orthographic box must have non-zero extent: "
            f"left={left}, right={right}, bottom={bottom}, top={top}, near={near}, far={far}"
        )

    lr = 1.0 / (left - right)
    bt = 1.0 / (bottom - top)
    nf = 1.0 / (near - far)

    return Matrix4.from_rows(
        [
            [-2 * lr, 0, 0, (left + right) * lr],
            [0, -2 * bt, 0, (bottom + top) * bt],
            [0, 0, 2 * nf, (near + far) * nf],
            [0, 0, 0, 1],
        ]
    )


def project_point(m: Matrix4, point: Vector3) -> Vector3 | None:
    """
    Однородное применение 4×4 к точке с явным делением на w.

    Returns:
        Vector3 после деления на w, или None если w == 0
        (точка в плоскости камеры, проекция не определена)
    """
    clip = apply_to_vector(m, Vector4(x=point.x, y=point.y, z=point.z, w=1.0))
    if clip.w == 0.0:
        return None
    return Vector3(x=clip.x / clip.w, y=clip.y / clip.w, z=clip.z / clip.w)
