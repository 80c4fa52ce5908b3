"""
JSON Schema Contract Validators

Модуль для валидации payload'ов, которыми обмениваются ядро и слой
визуализации, согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- vector2.json     — литерал {x, y}
- vector3.json     — литерал {x, y, z}
- quaternion.json  — литерал {w, x, y, z}
- matrix.json      — квадратный массив массивов 2×2, 3×3 или 4×4
- eigen_pair.json  — {eigenvalue: {real, imag, isComplex}, eigenvector}
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета: src/linalg/contracts/schema/.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'vector2')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует валидацию данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class Vector2Validator(ContractValidator):
    """Валидатор литерала {x, y}."""

    def __init__(self):
        super().__init__("vector2")


class Vector3Validator(ContractValidator):
    """Валидатор литерала {x, y, z}."""

    def __init__(self):
        super().__init__("vector3")


class QuaternionValidator(ContractValidator):
    """Валидатор литерала {w, x, y, z}."""

    def __init__(self):
        super().__init__("quaternion")


class MatrixValidator(ContractValidator):
    """
    Валидатор матрицы как массива массивов.

    Схема допускает только квадратные 2×2, 3×3 и 4×4.
    """

    def __init__(self):
        super().__init__("matrix")


class EigenPairValidator(ContractValidator):
    """Валидатор собственной пары, отдаваемой слою визуализации."""

    def __init__(self):
        super().__init__("eigen_pair")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_vector2(data: Dict[str, Any]) -> None:
    """
    Валидация литерала {x, y}.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    Vector2Validator().validate(data)


def validate_vector3(data: Dict[str, Any]) -> None:
    """
    Валидация литерала {x, y, z}.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    Vector3Validator().validate(data)


def validate_quaternion(data: Dict[str, Any]) -> None:
    """
    Валидация литерала {w, x, y, z}.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    QuaternionValidator().validate(data)


def validate_matrix(data: list) -> None:
    """
    Валидация матрицы (массив массивов).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MatrixValidator().validate(data)


def validate_eigen_pair(data: Dict[str, Any]) -> None:
    """
    Валидация собственной пары.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    EigenPairValidator().validate(data)
