"""
Twiddle Factors — Roots of Unity for FFT/IFFT Butterflies

Модуль строит наборы twiddle factors для преобразования размера n:

    inverse (IFFT): w = e^{+i·2π/n},  factors[k] = w^k
    forward (FFT):  w = e^{-i·2π/n},  factors[k] = w^k

Степени вычисляются через Complex.power (формула Муавра), а не
последовательным умножением, поэтому ошибка не накапливается с ростом k.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(factors) == size
2. factors[k] ≈ w^k, в частности factors[0] == Complex(1, 0)
3. Таблица неизменяема (frozen=True)
"""

import logging

from pydantic import BaseModel, Field, model_validator

from src.dft.math.complex_number import Complex
from src.dft.math.numerical_safeguards import validate_positive_int

logger = logging.getLogger(__name__)


# =============================================================================
# TWIDDLE FACTORS
# =============================================================================


def twiddle_base(n: int, inverse: bool = True) -> Complex:
    """
    Базовый twiddle factor для преобразования размера n.

    Args:
        n: Размер преобразования (положительное целое)
        inverse: True для IFFT (e^{+i·2π/n}), False для FFT (сопряжённый)

    Returns:
        Примитивный корень n-й степени из единицы
    """
    w = Complex.root_of_unity(n)
    if inverse:
        return w
    return w.conjugate()


def twiddle_factors(n: int, inverse: bool = True) -> tuple[Complex, ...]:
    """
    Полный набор twiddle factors w^0, w^1, ..., w^{n-1}.

    Args:
        n: Размер преобразования
        inverse: Направление преобразования (см. twiddle_base)

    Returns:
        Кортеж из n комплексных чисел

    Examples:
        >>> [str(w) for w in twiddle_factors(4)]
        ['1.0+0.0i', '0.0+1.0i', '-1.0+0.0i', '0.0+-1.0i']
    """
    base = twiddle_base(n, inverse)
    return tuple(base.power(k) for k in range(n))


# =============================================================================
# TWIDDLE TABLE
# =============================================================================


class TwiddleTable(BaseModel):
    """
    Таблица twiddle factors для преобразования фиксированного размера.

    Immutable модель (frozen=True); строится через build_twiddle_table.
    """

    size: int = Field(..., gt=0, description="Размер преобразования n")
    inverse: bool = Field(..., description="True для IFFT, False для FFT")
    factors: tuple[Complex, ...] = Field(..., description="w^k для k = 0..n-1")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_factors(self) -> "TwiddleTable":
        """
        Проверка factors[k] ≈ w^k для всех k.

        Таблица, загруженная из payload, не может подменить корни из единицы.
        """
        if len(self.factors) != self.size:
            raise ValueError(
                f"twiddle table of size {self.size} has {len(self.factors)} factors"
            )

        expected = twiddle_factors(self.size, self.inverse)
        for k, (w, w_k) in enumerate(zip(self.factors, expected)):
            if not w.is_close(w_k):
                raise ValueError(f"factor {k} is {w}, expected w^{k} = {w_k}")
        return self

    def factor(self, k: int) -> Complex:
        """
        Twiddle factor w^k для произвольного целого k.

        Корни из единицы периодичны: w^k == w^{k mod n}.
        """
        return self.factors[k % self.size]

    def to_payload(self) -> dict:
        """JSON-совместимый dict (контракт twiddle_table)."""
        return self.model_dump(mode="json")


def build_twiddle_table(n: int, inverse: bool = True) -> TwiddleTable:
    """
    Построение таблицы twiddle factors.

    Args:
        n: Размер преобразования (положительное целое)
        inverse: True для IFFT, False для FFT

    Raises:
        TypeError: Если n не int
        ValueError: Если n <= 0
    """
    validate_positive_int(n, "n")

    factors = twiddle_factors(n, inverse)
    logger.debug(
        "Built %s twiddle table: size=%d base=%s",
        "inverse" if inverse else "forward",
        n,
        factors[1] if n > 1 else factors[0],
    )
    return TwiddleTable(size=n, inverse=inverse, factors=factors)
