"""
Тесты для модуля Transform3D

Проверяет:
1. Повороты вокруг осей и композицию Эйлера Rz·Ry·Rx
2. Однородные матрицы переноса, масштаба, отражения
3. Кватернион → матрица, Эйлер → кватернион
4. Видовую матрицу look_at
5. Перспективную и ортографическую проекции, деление на w
6. Ошибки вырожденных параметров
"""

import math

import pytest

from src.linalg.domain import Matrix3, Matrix4, Quaternion, Vector3, Vector4, ZeroVectorError
from src.linalg.math.determinant import determinant
from src.linalg.math.matrix_ops import (
    apply_homogeneous,
    apply_to_vector,
    compose,
    matrices_close,
    multiply,
    transpose,
)
from src.linalg.math.transform3d import (
    euler_rotation,
    euler_to_quaternion,
    look_at,
    orthographic,
    perspective,
    project_point,
    quaternion_to_matrix,
    reflection_matrix,
    rotation_x,
    rotation_y,
    rotation_z,
    scale_matrix,
    scale_matrix3,
    to_homogeneous,
    translation_matrix,
)
from src.linalg.math.vector_ops import vectors_close

ABS_TOL = 1e-12


def _close(a: Vector3, b: Vector3) -> bool:
    return vectors_close(a, b, rel_tol=0.0, abs_tol=ABS_TOL)


# =============================================================================
# ПОВОРОТЫ
# =============================================================================


class TestRotations:
    """Тесты rotation_x/y/z и euler_rotation"""

    def test_rotation_z_quarter_turn(self) -> None:
        v = apply_to_vector(rotation_z(math.pi / 2), Vector3(x=1, y=0, z=0))
        assert _close(v, Vector3(x=0, y=1, z=0))

    def test_rotation_x_quarter_turn(self) -> None:
        """Правая система: y → z"""
        v = apply_to_vector(rotation_x(math.pi / 2), Vector3(x=0, y=1, z=0))
        assert _close(v, Vector3(x=0, y=0, z=1))

    def test_rotation_y_quarter_turn(self) -> None:
        """Правая система: z → x"""
        v = apply_to_vector(rotation_y(math.pi / 2), Vector3(x=0, y=0, z=1))
        assert _close(v, Vector3(x=1, y=0, z=0))

    @pytest.mark.parametrize("builder", [rotation_x, rotation_y, rotation_z])
    def test_rotation_is_orthonormal(self, builder) -> None:
        r = builder(0.73)
        assert matrices_close(multiply(r, transpose(r)), Matrix3.identity(), abs_tol=1e-12)
        assert determinant(r) == pytest.approx(1.0)

    def test_zero_angle_is_identity(self) -> None:
        assert rotation_z(0.0) == Matrix3.identity()

    def test_non_finite_angle_rejected(self) -> None:
        with pytest.raises(ValueError, match="angle must be a valid float"):
            rotation_x(math.nan)

    def test_euler_composition_order(self) -> None:
        """Rz·Ry·Rx: первым применяется поворот вокруг X"""
        rx, ry, rz = 0.3, -0.4, 1.1
        expected = compose(rotation_z(rz), rotation_y(ry), rotation_x(rx))
        assert euler_rotation(rx, ry, rz) == expected

    def test_to_homogeneous(self) -> None:
        h = to_homogeneous(rotation_z(math.pi / 2))
        assert isinstance(h, Matrix4)
        assert h[3] == (0.0, 0.0, 0.0, 1.0)
        assert h.column(3) == (0.0, 0.0, 0.0, 1.0)
        p = apply_homogeneous(h, Vector3(x=1, y=0, z=0))
        assert _close(p, Vector3(x=0, y=1, z=0))


# =============================================================================
# ПЕРЕНОС, МАСШТАБ, ОТРАЖЕНИЕ
# =============================================================================


class TestAffineBuilders:
    """Тесты translation_matrix / scale_matrix / reflection_matrix"""

    def test_translation_moves_points_not_directions(self) -> None:
        t = translation_matrix(1, 2, 3)
        assert apply_to_vector(t, Vector4(x=1, y=1, z=1, w=1)) == Vector4(x=2, y=3, z=4, w=1)
        assert apply_to_vector(t, Vector4(x=1, y=1, z=1, w=0)) == Vector4(x=1, y=1, z=1, w=0)

    def test_scale(self) -> None:
        p = apply_homogeneous(scale_matrix(2, 3, 4), Vector3(x=1, y=1, z=1))
        assert p == Vector3(x=2, y=3, z=4)
        assert scale_matrix3(2, 3, 4) == Matrix3.from_rows([[2, 0, 0], [0, 3, 0], [0, 0, 4]])

    @pytest.mark.parametrize(
        "axis,expected",
        [
            ("x", Vector3(x=2, y=-3, z=5)),
            ("y", Vector3(x=-2, y=3, z=5)),
            ("origin", Vector3(x=-2, y=-3, z=5)),
            ("diagonal", Vector3(x=3, y=2, z=5)),
        ],
    )
    def test_reflection(self, axis: str, expected: Vector3) -> None:
        p = apply_homogeneous(reflection_matrix(axis), Vector3(x=2, y=3, z=5))
        assert p == expected

    def test_reflection_is_involution(self) -> None:
        for axis in ("x", "y", "origin", "diagonal"):
            r = reflection_matrix(axis)
            assert multiply(r, r) == Matrix4.identity()

    def test_unknown_reflection_axis(self) -> None:
        with pytest.raises(ValueError, match="Unknown reflection axis 'w'"):
            reflection_matrix("w")


# =============================================================================
# КВАТЕРНИОНЫ
# =============================================================================


class TestQuaternions:
    """Тесты quaternion_to_matrix / euler_to_quaternion"""

    def test_identity_quaternion(self) -> None:
        assert quaternion_to_matrix(Quaternion.identity()) == Matrix3.identity()

    def test_quarter_turn_about_z(self) -> None:
        half = math.pi / 4
        q = Quaternion(w=math.cos(half), x=0.0, y=0.0, z=math.sin(half))
        assert matrices_close(quaternion_to_matrix(q), rotation_z(math.pi / 2), abs_tol=1e-12)

    def test_not_normalized(self) -> None:
        """Ненормированный кватернион не исправляется"""
        m = quaternion_to_matrix(Quaternion(w=0.0, x=2.0, y=0.0, z=0.0))
        assert m[1][1] == -7.0

    @pytest.mark.parametrize(
        "angles",
        [(0.0, 0.0, 0.0), (0.3, -0.4, 1.1), (math.pi / 2, 0.2, -2.5), (-1.0, 1.2, 0.7)],
    )
    def test_euler_quaternion_matches_euler_matrix(self, angles) -> None:
        q = euler_to_quaternion(*angles)
        assert q.norm() == pytest.approx(1.0)
        assert matrices_close(
            quaternion_to_matrix(q), euler_rotation(*angles), rel_tol=0.0, abs_tol=1e-12
        )


# =============================================================================
# КАМЕРА
# =============================================================================


class TestLookAt:
    """Тесты look_at"""

    def test_camera_on_z_axis(self) -> None:
        view = look_at(Vector3(x=0, y=0, z=5), Vector3(x=0, y=0, z=0), Vector3(x=0, y=1, z=0))
        assert view == Matrix4.from_rows(
            [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, -5], [0, 0, 0, 1]]
        )

    def test_eye_maps_to_origin_and_target_ahead(self) -> None:
        eye = Vector3(x=3, y=2, z=-4)
        target = Vector3(x=-1, y=0.5, z=2)
        view = look_at(eye, target, Vector3(x=0, y=1, z=0))

        assert vectors_close(
            apply_homogeneous(view, eye), Vector3(x=0, y=0, z=0), rel_tol=0.0, abs_tol=1e-12
        )

        distance = math.sqrt(4**2 + 1.5**2 + 6**2)
        ahead = apply_homogeneous(view, target)
        assert (ahead.x, ahead.y, ahead.z) == pytest.approx((0.0, 0.0, -distance), abs=1e-9)

    def test_eye_equals_target(self) -> None:
        p = Vector3(x=1, y=1, z=1)
        with pytest.raises(ZeroVectorError, match="eye and target coincide"):
            look_at(p, p, Vector3(x=0, y=1, z=0))

    def test_up_parallel_to_view(self) -> None:
        with pytest.raises(ZeroVectorError, match="up is parallel"):
            look_at(Vector3(x=0, y=0, z=0), Vector3(x=0, y=5, z=0), Vector3(x=0, y=1, z=0))


# =============================================================================
# ПРОЕКЦИИ
# =============================================================================


class TestProjections:
    """Тесты perspective / orthographic / project_point"""

    def test_perspective_near_and_far_planes(self) -> None:
        proj = perspective(math.pi / 2, 1.0, 1.0, 10.0)
        near_point = project_point(proj, Vector3(x=0, y=0, z=-1))
        far_point = project_point(proj, Vector3(x=0, y=0, z=-10))
        assert near_point.z == pytest.approx(-1.0)
        assert far_point.z == pytest.approx(1.0)

    def test_perspective_layout(self) -> None:
        proj = perspective(math.pi / 2, 2.0, 1.0, 10.0)
        assert proj[0][0] == pytest.approx(0.5)
        assert proj[1][1] == pytest.approx(1.0)
        assert proj[3] == (0.0, 0.0, -1.0, 0.0)

    def test_perspective_divide(self) -> None:
        """Точки на одном луче проецируются в одну точку"""
        proj = perspective(math.pi / 3, 1.5, 0.1, 100.0)
        a = project_point(proj, Vector3(x=1, y=2, z=-5))
        b = project_point(proj, Vector3(x=2, y=4, z=-10))
        assert (a.x, a.y) == pytest.approx((b.x, b.y))

    def test_project_point_w_zero(self) -> None:
        """Точка в плоскости камеры: проекция не определена"""
        proj = perspective(math.pi / 2, 1.0, 1.0, 10.0)
        assert project_point(proj, Vector3(x=1, y=1, z=0)) is None

    def test_project_point_affine(self) -> None:
        p = project_point(translation_matrix(1, 2, 3), Vector3(x=0, y=0, z=0))
        assert p == Vector3(x=1, y=2, z=3)

    @pytest.mark.parametrize(
        "args,match",
        [
            ((math.pi / 2, 0.0, 1.0, 10.0), "aspect must be non-zero"),
            ((math.pi / 2, 1.0, 5.0, 5.0), "near and far must differ"),
            ((0.0, 1.0, 1.0, 10.0), "fov must not be a multiple"),
            ((math.nan, 1.0, 1.0, 10.0), "fov must be a valid float"),
        ],
    )
    def test_perspective_degenerate(self, args, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            perspective(*args)

    def test_orthographic_maps_box_to_cube(self) -> None:
        proj = orthographic(0.0, 4.0, 0.0, 2.0, 1.0, 10.0)
        lo = apply_homogeneous(proj, Vector3(x=0, y=0, z=-1))
        hi = apply_homogeneous(proj, Vector3(x=4, y=2, z=-10))
        assert (lo.x, lo.y, lo.z) == pytest.approx((-1.0, -1.0, -1.0))
        assert (hi.x, hi.y, hi.z) == pytest.approx((1.0, 1.0, 1.0))

    def test_orthographic_degenerate(self) -> None:
        with pytest.raises(ValueError, match="non-zero extent"):
            orthographic(1.0, 1.0, 0.0, 2.0, 1.0, 10.0)
