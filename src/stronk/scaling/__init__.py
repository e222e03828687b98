"""Scaling engine and damage component rescaler."""

from stronk.scaling.components import (
    scale_all_damage_components,
    scale_damage_components,
    scale_first_damage_component,
)
from stronk.scaling.engine import scale_by_table, scale_statistic

__all__ = [
    "scale_by_table",
    "scale_statistic",
    "scale_all_damage_components",
    "scale_damage_components",
    "scale_first_damage_component",
]
