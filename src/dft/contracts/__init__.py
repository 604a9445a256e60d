"""
Contract Validation Module

JSON Schema контракты для payload комплексных чисел и таблиц
twiddle factors, связанные с соответствующими pydantic моделями.
"""

from .validators import (
    SCHEMA_DIR,
    ComplexValueValidator,
    ContractValidator,
    SchemaLoader,
    TwiddleTableValidator,
    dump_twiddle_table,
    load_complex_value,
    load_twiddle_table,
    validate_complex_value,
    validate_twiddle_table,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexValueValidator",
    "TwiddleTableValidator",
    # Functions
    "validate_complex_value",
    "validate_twiddle_table",
    "load_complex_value",
    "load_twiddle_table",
    "dump_twiddle_table",
]
