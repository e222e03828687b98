"""Reference tables: one level × proficiency table per statistic kind."""

from stronk.tables.registry import (
    DATA_DIR,
    get_table_for_statistic,
    load_table,
    table_from_data,
)

__all__ = [
    "DATA_DIR",
    "get_table_for_statistic",
    "load_table",
    "table_from_data",
]
