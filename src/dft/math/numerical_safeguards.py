"""
Numerical Safeguards — Epsilon Guards for Complex Arithmetic

Модуль обеспечивает численную устойчивость комплексной арифметики:
- Zero-snap: подавление шума float вблизи нуля
- NaN/Inf валидация входов (невалидные значения отвергаются, а не пропагируют)
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Компонента с abs(x) < ZERO_SNAP_EPS становится ровно 0.0
2. Компонента с abs(x) >= ZERO_SNAP_EPS не изменяется
3. NaN/Inf никогда не попадают в значение (ValueError на границе)
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог zero-snap для компонент комплексного числа
# Гасит шум после тригонометрических round-trip (rect → polar → rect),
# чтобы twiddle factors были бит-совместимы между реализациями
ZERO_SNAP_EPS: Final[float] = 1e-14

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value равно NaN или ±Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация целого положительного параметра (порядок корня, размер таблицы).

    bool отвергается явно: True/False не являются размером преобразования.

    Raises:
        TypeError: Если value не int
        ValueError: Если value <= 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


# =============================================================================
# ZERO-SNAP
# =============================================================================


def snap_to_zero(value: float, eps: float = ZERO_SNAP_EPS) -> float:
    """
    Прижатие почти-нулевого значения к точному нулю.

    Args:
        value: Исходное значение
        eps: Порог (default: ZERO_SNAP_EPS)

    Returns:
        0.0 если abs(value) < eps, иначе value без изменений

    Examples:
        >>> snap_to_zero(6.123233995736766e-17)
        0.0
        >>> snap_to_zero(1e-14)
        1e-14
        >>> snap_to_zero(-2.5)
        -2.5
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    if abs(value) < eps:
        # -0.0 тоже становится +0.0
        return 0.0
    return value


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.0, 1e-13)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """Проверка, близко ли значение к нулю: abs(value) <= tol."""
    return abs(value) <= tol
