"""
Contract Validation Module

Модуль для валидации JSON контрактов сохранённых интервалов.
"""

from .validators import (
    ContractValidator,
    IntervalRecordValidator,
    SchemaLoader,
    validate_interval_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntervalRecordValidator",
    # Functions
    "validate_interval_record",
]
