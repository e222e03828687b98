"""
Contract Validation Module

Validation of reference table JSON data against its JSON Schema contract.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    StatTableValidator,
    validate_stat_table,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "StatTableValidator",
    # Functions
    "validate_stat_table",
]
