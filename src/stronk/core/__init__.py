"""
Core domain models, mathematical primitives, and contracts.

This package contains the building blocks that are independent of the
command-line surface: value objects, numeric primitives and the JSON Schema
contract for reference table data.
"""
