"""
Core math modules ядра линейной алгебры

Векторная и матричная арифметика, определители, ранг, собственные
значения, 3D преобразования и интерполяция.
"""

# Numerical Safeguards
from src.linalg.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PIVOT,
    EPS_ROUND_TRIP,
    # NaN/Inf checks
    all_finite,
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_zero,
    max_abs,
    # Utilities
    clamp,
    # Validation
    validate_finite,
    validate_non_zero,
)

# Vector Ops
from src.linalg.math.vector_ops import (
    add,
    angle_between,
    cross,
    cross_z,
    distance,
    dot,
    magnitude,
    magnitude_squared,
    negate,
    normalize,
    perpendicular,
    projection,
    reflect,
    scale,
    subtract,
    vectors_close,
)

# Matrix Ops
from src.linalg.math.matrix_ops import (
    apply_homogeneous,
    apply_to_vector,
    compose,
    identity,
    matrices_close,
    multiply,
    scale_matrix,
    trace,
    transpose,
)
from src.linalg.math.matrix_ops import add as add_matrices
from src.linalg.math.matrix_ops import subtract as subtract_matrices

# Determinant / Inverse
from src.linalg.math.determinant import (
    SINGULARITY_REPORT_EPS,
    InverseResult,
    adjugate,
    cofactor,
    determinant,
    inverse,
    is_near_singular,
    minor,
)

# Rank
from src.linalg.math.rank import matrix_rank

# Eigen Solver
from src.linalg.math.eigen_solver import (
    DEFAULT_CONFIG,
    EigenSolverConfig,
    characteristic_coefficients,
    eigen_2x2,
    eigen_3x3,
    eigen_decomposition,
    eigenvalues_2x2,
    eigenvalues_3x3,
    eigenvector_2x2,
    eigenvector_3x3,
)

# Transform3D
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
    scale_matrix3,
    to_homogeneous,
    translation_matrix,
)
from src.linalg.math.transform3d import scale_matrix as scale_matrix4

# Interpolation
from src.linalg.math.interpolation import SLERP_SIN_EPS, lerp, lerp_vector, slerp

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_CALC",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PIVOT",
    "EPS_ROUND_TRIP",
    # Numerical Safeguards — NaN/Inf checks
    "all_finite",
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_zero",
    "max_abs",
    # Numerical Safeguards — Utilities
    "clamp",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_non_zero",
    # Vector Ops
    "add",
    "angle_between",
    "cross",
    "cross_z",
    "distance",
    "dot",
    "magnitude",
    "magnitude_squared",
    "negate",
    "normalize",
    "perpendicular",
    "projection",
    "reflect",
    "scale",
    "subtract",
    "vectors_close",
    # Matrix Ops
    "add_matrices",
    "apply_homogeneous",
    "apply_to_vector",
    "compose",
    "identity",
    "matrices_close",
    "multiply",
    "scale_matrix",
    "subtract_matrices",
    "trace",
    "transpose",
    # Determinant / Inverse — Constants
    "SINGULARITY_REPORT_EPS",
    # Determinant / Inverse — Types
    "InverseResult",
    # Determinant / Inverse — Functions
    "adjugate",
    "cofactor",
    "determinant",
    "inverse",
    "is_near_singular",
    "minor",
    # Rank
    "matrix_rank",
    # Eigen Solver — Config
    "DEFAULT_CONFIG",
    "EigenSolverConfig",
    # Eigen Solver — Functions
    "characteristic_coefficients",
    "eigen_2x2",
    "eigen_3x3",
    "eigen_decomposition",
    "eigenvalues_2x2",
    "eigenvalues_3x3",
    "eigenvector_2x2",
    "eigenvector_3x3",
    # Transform3D
    "euler_rotation",
    "euler_to_quaternion",
    "look_at",
    "orthographic",
    "perspective",
    "project_point",
    "quaternion_to_matrix",
    "reflection_matrix",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "scale_matrix3",
    "scale_matrix4",
    "to_homogeneous",
    "translation_matrix",
    # Interpolation
    "SLERP_SIN_EPS",
    "lerp",
    "lerp_vector",
    "slerp",
]
