"""
Payloads — преобразование между JSON-литералами и типизированными значениями

Слой визуализации передаёт векторы как {x, y} / {x, y, z}, матрицы как
массив массивов, и ожидает собственные пары в формате
{eigenvalue: {real, imag, isComplex}, eigenvector: {x, y[, z]} | null}.

Входящие payload'ы сначала проверяются JSON Schema контрактом, затем
превращаются в неизменяемые модели ядра. Исходящие payload'ы строятся из
моделей и удовлетворяют тем же схемам.
"""

from typing import Any, Dict, List, Sequence

from src.linalg.contracts.validators import (
    EigenPairValidator,
    MatrixValidator,
    QuaternionValidator,
    Vector2Validator,
    Vector3Validator,
)
from src.linalg.domain.eigen import EigenDecomposition, EigenPair
from src.linalg.domain.matrices import Matrix2, Matrix3, Matrix4, SquareMatrix, matrix_from_rows
from src.linalg.domain.vectors import Quaternion, Vector2, Vector3


# =============================================================================
# INBOUND
# =============================================================================


def vector_from_payload(data: Dict[str, Any]) -> Vector2 | Vector3:
    """
    Вектор из литерала {x, y} или {x, y, z}.

    Наличие ключа "z" выбирает 3D контракт.

    Raises:
        ValidationError: Если литерал не соответствует схеме
    """
    if isinstance(data, dict) and "z" in data:
        Vector3Validator().validate(data)
        return Vector3(x=data["x"], y=data["y"], z=data["z"])

    Vector2Validator().validate(data)
    return Vector2(x=data["x"], y=data["y"])


def quaternion_from_payload(data: Dict[str, Any]) -> Quaternion:
    """
    Кватернион из литерала {w, x, y, z} (без нормализации).

    Raises:
        ValidationError: Если литерал не соответствует схеме
    """
    QuaternionValidator().validate(data)
    return Quaternion(w=data["w"], x=data["x"], y=data["y"], z=data["z"])


def matrix_from_payload(data: List[List[float]]) -> Matrix2 | Matrix3 | Matrix4:
    """
    Матрица из массива массивов.

    Raises:
        ValidationError: Если массив не квадратный 2×2, 3×3 или 4×4
    """
    MatrixValidator().validate(data)
    return matrix_from_rows(data)


# =============================================================================
# OUTBOUND
# =============================================================================


def vector_to_payload(v: Vector2 | Vector3) -> Dict[str, float]:
    return v.model_dump()


def matrix_to_payload(m: SquareMatrix) -> List[List[float]]:
    return m.to_list()


def eigen_pair_to_payload(pair: EigenPair) -> Dict[str, Any]:
    """
    Собственная пара в формате слоя визуализации.

    is_complex сериализуется как isComplex; отсутствующий вектор как None.
    """
    payload = pair.model_dump(by_alias=True)
    EigenPairValidator().validate(payload)
    return payload


def eigen_decomposition_to_payload(result: EigenDecomposition) -> Sequence[Dict[str, Any]]:
    """Список собственных пар в порядке решателя."""
    return [eigen_pair_to_payload(pair) for pair in result.pairs]
