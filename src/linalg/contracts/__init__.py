"""
Contract Validation Module

Валидация JSON payload'ов слоя визуализации и их преобразование в модели ядра.
"""

from .payloads import (
    eigen_decomposition_to_payload,
    eigen_pair_to_payload,
    matrix_from_payload,
    matrix_to_payload,
    quaternion_from_payload,
    vector_from_payload,
    vector_to_payload,
)
from .validators import (
    ContractValidator,
    EigenPairValidator,
    MatrixValidator,
    QuaternionValidator,
    SchemaLoader,
    Vector2Validator,
    Vector3Validator,
    validate_eigen_pair,
    validate_matrix,
    validate_quaternion,
    validate_vector2,
    validate_vector3,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Vector2Validator",
    "Vector3Validator",
    "QuaternionValidator",
    "MatrixValidator",
    "EigenPairValidator",
    # Functions
    "validate_vector2",
    "validate_vector3",
    "validate_quaternion",
    "validate_matrix",
    "validate_eigen_pair",
    # Payloads
    "vector_from_payload",
    "quaternion_from_payload",
    "matrix_from_payload",
    "vector_to_payload",
    "matrix_to_payload",
    "eigen_pair_to_payload",
    "eigen_decomposition_to_payload",
]
