"""
Complex — Immutable Complex Number for DFT/IFFT

Immutable Pydantic модель комплексного числа в прямоугольной форме.
Числовая основа для FFT/IFFT: арифметика, полярные координаты,
возведение в целую степень по формуле Муавра и корни из единицы
(twiddle factors).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Компонента с abs(x) < ZERO_SNAP_EPS хранится как ровно 0.0
2. NaN/Inf компоненты отвергаются при создании (ValidationError)
3. Экземпляр неизменяем: каждая операция возвращает новый Complex
4. angle() использует явную таблицу ветвей, а не atan2:
   для нуля результат -π/2

ФОРМУЛЫ:
    (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    z^n = r^n · e^{i·n·φ}
    w_n = e^{i·2π/n}
"""

import math
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.dft.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    snap_to_zero,
    validate_finite,
    validate_positive_int,
)

Operand = Union["Complex", int, float]


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число real + imaginary·i.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Каждая компонента проходит zero-snap при создании, поэтому результаты
    арифметики тоже "очищены" от шума вблизи нуля.

    Конструкторы:
        Complex()                  -> 0 + 0i
        Complex(a)                 -> a + 0i
        Complex(a, b)              -> a + bi
        Complex.from_polar(r, φ)   -> r·e^{iφ}
        Complex.e_to_i(φ)          -> e^{iφ}
        Complex.root_of_unity(n)   -> e^{i·2π/n}
    """

    real: float = Field(0.0, description="Действительная часть")
    imaginary: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    def __init__(self, real: float = 0.0, imaginary: float = 0.0, **data: Any) -> None:
        super().__init__(real=real, imaginary=imaginary, **data)

    @field_validator("real", "imaginary", mode="before")
    @classmethod
    def check_component_type(cls, v: Any, info: ValidationInfo) -> Any:
        """
        Только int/float: строки и bool не приводятся к числу.

        Те же правила, что и для операндов арифметики.
        """
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(
                f"{info.field_name} must be a real number, got {type(v).__name__}"
            )
        return v

    @field_validator("real", "imaginary")
    @classmethod
    def snap_component(cls, v: float, info: ValidationInfo) -> float:
        """
        Валидация и zero-snap компоненты.

        Raises:
            ValueError: Если компонента NaN/Inf
        """
        validate_finite(v, info.field_name)
        return snap_to_zero(v)

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "Complex":
        """
        Копия с изменёнными компонентами.

        BaseModel.model_copy не валидирует update; здесь обновлённые
        компоненты проходят те же проверки и zero-snap, что и при создании.
        """
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**self.model_dump(), **update})

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def e_to_i(cls, phi: float) -> "Complex":
        """
        Точка на единичной окружности: e^{iφ} = (cos φ, sin φ).

        Args:
            phi: Угол в радианах

        Raises:
            ValueError: Если phi NaN/Inf

        Examples:
            >>> Complex.e_to_i(0.0)
            Complex(real=1.0, imaginary=0.0)
            >>> Complex.e_to_i(math.pi / 2)
            Complex(real=0.0, imaginary=1.0)
        """
        validate_finite(phi, "angle")
        return cls(math.cos(phi), math.sin(phi))

    @classmethod
    def from_polar(cls, r: float, phi: float) -> "Complex":
        """
        Комплексное число по радиусу и углу: r·e^{iφ}.

        Вычисляется как e_to_i(φ) · Complex(r), так что промежуточные
        cos/sin проходят zero-snap до умножения на радиус.

        Raises:
            ValueError: Если r или phi NaN/Inf
        """
        validate_finite(r, "radius")
        return cls.e_to_i(phi).multiply(cls(r))

    @classmethod
    def root_of_unity(cls, n: int) -> "Complex":
        """
        Примитивный корень n-й степени из единицы: e^{i·2π/n}.

        Базовый twiddle factor для преобразования размера n; его степени
        0..n-1 дают полный набор twiddle factors.

        Args:
            n: Порядок корня (положительное целое)

        Raises:
            TypeError: Если n не int
            ValueError: Если n <= 0

        Examples:
            >>> Complex.root_of_unity(4)
            Complex(real=0.0, imaginary=1.0)
            >>> Complex.root_of_unity(2)
            Complex(real=-1.0, imaginary=0.0)
        """
        validate_positive_int(n, "n")
        return cls.e_to_i(2 * math.pi / n)

    @classmethod
    def from_builtin(cls, z: complex) -> "Complex":
        """Конверсия из встроенного complex (с zero-snap)."""
        return cls(z.real, z.imag)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Complex") -> "Complex":
        """self + other (покомпонентно)."""
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: "Complex") -> "Complex":
        """self - other (покомпонентно)."""
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: "Complex") -> "Complex":
        """
        self · other по прямоугольной формуле.

        Examples:
            >>> Complex(1, 2).multiply(Complex(3, 4))
            Complex(real=-5.0, imaginary=10.0)
        """
        re = self.real * other.real - self.imaginary * other.imaginary
        im = self.real * other.imaginary + self.imaginary * other.real
        return Complex(re, im)

    def conjugate(self) -> "Complex":
        """Комплексно сопряжённое число (real, -imaginary)."""
        return Complex(self.real, -self.imaginary)

    def negate(self) -> "Complex":
        """Противоположное число (-real, -imaginary)."""
        return Complex(-self.real, -self.imaginary)

    def power(self, n: int) -> "Complex":
        """
        Возведение в целую степень через полярную форму (формула Муавра).

        z^n = from_polar(radius^n, n·angle). В отличие от n-кратного
        умножения ошибка округления не накапливается с ростом n.

        Args:
            n: Показатель степени (int, может быть отрицательным или нулём)

        Returns:
            self ** n

        Raises:
            TypeError: Если n не int
            ZeroDivisionError: Если self == 0 и n < 0
            OverflowError: Если radius или radius^n выходит за пределы float
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"exponent must be an int, got {type(n).__name__}")

        r = self.radius()
        if not is_valid_float(r):
            # real² + imaginary² вышел за пределы float
            raise OverflowError(f"radius of {self} is not representable as a float")

        if r == 0.0 and n < 0:
            raise ZeroDivisionError(f"0 cannot be raised to a negative power ({n})")

        # float ** int сам бросает OverflowError при переполнении
        r_n = r**n
        if not is_valid_float(r_n):
            raise OverflowError(f"radius^{n} is not representable as a float")

        return Complex.from_polar(r_n, n * self.angle())

    # -------------------------------------------------------------------------
    # Полярные координаты
    # -------------------------------------------------------------------------

    def radius(self) -> float:
        """Модуль |z| = sqrt(real² + imaginary²), всегда >= 0."""
        return math.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    def angle(self) -> float:
        """
        Главное значение аргумента в (-π, π].

        Таблица ветвей (порядок проверок важен):
            real > 0                 → atan(im/re)
            real < 0, imaginary >= 0 → atan(im/re) + π
            real < 0, imaginary < 0  → atan(im/re) - π
            real == 0, imaginary > 0 → π/2
            real == 0, imaginary <= 0 → -π/2  (в том числе для нуля)

        Examples:
            >>> Complex(-1, 0).angle() == math.pi
            True
            >>> Complex(0, 0).angle() == -math.pi / 2
            True
        """
        if self.real > 0:
            return math.atan(self.imaginary / self.real)

        if self.real < 0:
            if self.imaginary >= 0:
                return math.atan(self.imaginary / self.real) + math.pi
            return math.atan(self.imaginary / self.real) - math.pi

        # real == 0
        if self.imaginary > 0:
            return math.pi / 2

        return -math.pi / 2

    # -------------------------------------------------------------------------
    # Сравнение и представление
    # -------------------------------------------------------------------------

    def is_close(
        self,
        other: "Complex",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное сравнение с толерантностью."""
        return is_close(self.real, other.real, rel_tol, abs_tol) and is_close(
            self.imaginary, other.imaginary, rel_tol, abs_tol
        )

    def to_display_string(self) -> str:
        """
        Диагностическая строка "<real>+<imaginary>i".

        Знак не нормализуется: Complex(3, -2) → "3.0+-2.0i".
        Только для отладки, не для парсинга.
        """
        return f"{self.real}+{self.imaginary}i"

    def to_payload(self) -> dict[str, float]:
        """JSON-совместимый dict (контракт complex_value)."""
        return self.model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Числовой протокол Python
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_display_string()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __abs__(self) -> float:
        return self.radius()

    def __neg__(self) -> "Complex":
        return self.negate()

    def __add__(self, other: Operand) -> "Complex":
        rhs = _as_complex(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    def __radd__(self, other: Operand) -> "Complex":
        lhs = _as_complex(other)
        if lhs is None:
            return NotImplemented
        return lhs.add(self)

    def __sub__(self, other: Operand) -> "Complex":
        rhs = _as_complex(other)
        if rhs is None:
            return NotImplemented
        return self.subtract(rhs)

    def __rsub__(self, other: Operand) -> "Complex":
        lhs = _as_complex(other)
        if lhs is None:
            return NotImplemented
        return lhs.subtract(self)

    def __mul__(self, other: Operand) -> "Complex":
        rhs = _as_complex(other)
        if rhs is None:
            return NotImplemented
        return self.multiply(rhs)

    def __rmul__(self, other: Operand) -> "Complex":
        lhs = _as_complex(other)
        if lhs is None:
            return NotImplemented
        return lhs.multiply(self)

    def __pow__(self, n: int) -> "Complex":
        return self.power(n)


def _as_complex(value: Any) -> Optional[Complex]:
    """Приведение операнда к Complex; None для неподдерживаемых типов."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Complex(value)
    return None
