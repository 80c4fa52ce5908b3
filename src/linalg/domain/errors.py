"""
Errors — исключения ядра линейной алгебры

Только два условия являются исключениями:
- DimensionMismatchError: ошибка вызывающего кода (несовместимые размеры)
- ZeroVectorError: явный сигнал деления на модуль нулевого вектора

Вырожденность матрицы и несходимость итерации исключениями НЕ являются:
они возвращаются как значения (InverseResult, EigenDecomposition).
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DimensionMismatchError(ValueError):
    """
    Несовместимые размеры операндов.

    Возникает при смешивании Matrix2/Matrix3/Matrix4 или векторов разной
    размерности в add/subtract/multiply/apply. Это ошибка вызывающего кода,
    а не восстанавливаемое численное состояние, поэтому операция прерывается
    сразу, без усечения или дополнения данных.
    """

    pass


class ZeroVectorError(ZeroDivisionError):
    """
    Деление на модуль нулевого вектора.

    Возникает в normalize, projection (на нулевой вектор), angle_between,
    slerp и look_at (вырожденный базис камеры). Вместо молчаливого NaN/Inf
    вызывающий код получает явную ошибку и сам решает, как её показать.
    """

    pass
