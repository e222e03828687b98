"""
JSON Schema Contract Validators

Validates reference table data files against their formal JSON Schema
contract before they are turned into StatTable models.
Uses the jsonschema library (Draft 2020-12).

Schemas:
- stat_table.json (one reference table per statistic kind)
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
    JSON Schema file loader.

    Schemas ship inside the package, in schema/ next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'stat_table')

        Returns:
            The loaded schema as a dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If the data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Check validity without raising."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Iterate over every ValidationError found in data."""
        return self.validator.iter_errors(data)


class StatTableValidator(ContractValidator):
    """Validator for the stat_table contract."""

    def __init__(self):
        super().__init__("stat_table")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_stat_table(data: Dict[str, Any]) -> None:
    """
    Validate reference table data.

    Args:
        data: Decoded JSON of a table data file

    Raises:
        ValidationError: If the data does not match the schema
    """
    StatTableValidator().validate(data)
