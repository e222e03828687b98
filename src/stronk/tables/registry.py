"""
Reference table registry

Maps each StatType to its StatTable. Tables ship as JSON data files in
data/, one per statistic kind, named after the kind's prompt name.

Loading pipeline (once per kind, then cached for the process lifetime):
1. Read data/<kind>.json
2. Validate against the stat_table JSON Schema contract
3. Convert cells: integers as-is, dice expressions to their expected value
   rounded down (the published rounded averages)
4. Build the StatTable model (shape and monotonicity invariants)

Any failure here is a data error and propagates loudly.
"""

import json
import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

from stronk.core.contracts import validate_stat_table
from stronk.core.domain.proficiency import Proficiency
from stronk.core.domain.stat_table import StatTable
from stronk.core.domain.statistic import StatType
from stronk.damage.parser import parse_damage_expression

DATA_DIR: Final[Path] = Path(__file__).parent / "data"


def _to_table_value(cell: Any) -> float:
    if isinstance(cell, str):
        return float(math.floor(parse_damage_expression(cell)))
    return float(cell)


def table_from_data(data: dict[str, Any]) -> StatTable:
    """
    Build a StatTable from decoded table JSON.

    Raises:
        jsonschema.ValidationError: If the data breaks the stat_table contract
        pydantic.ValidationError: If the values break the table invariants
    """
    validate_stat_table(data)

    values = [[_to_table_value(cell) for cell in row] for row in data["values"]]
    proficiencies = [Proficiency.from_label(label) for label in data["proficiencies"]]

    return StatTable(values=values, proficiencies=proficiencies)


def load_table(path: Path) -> StatTable:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return table_from_data(data)


def _data_file(name: str) -> Path:
    return DATA_DIR / f"{name}.json"


@lru_cache(maxsize=None)
def get_table_for_statistic(kind: StatType) -> StatTable:
    """
    Reference table of a statistic kind.

    Every kind has a table; the match is exhaustive over StatType.
    """
    match kind:
        case StatType.PERCEPTION:
            path = _data_file("perception")
        case StatType.SKILL:
            path = _data_file("skill")
        case StatType.ARMOR_CLASS:
            path = _data_file("ac")
        case StatType.SAVING_THROW:
            path = _data_file("save")
        case StatType.HIT_POINTS:
            path = _data_file("hp")
        case StatType.RESISTANCE:
            path = _data_file("resistance")
        case StatType.WEAKNESS:
            path = _data_file("weakness")
        case StatType.STRIKE_ATTACK_BONUS:
            path = _data_file("strike-attack")
        case StatType.STRIKE_DAMAGE:
            path = _data_file("strike-damage")
        case StatType.SPELL_DC:
            path = _data_file("spell-dc")
        case StatType.SPELL_ATTACK_BONUS:
            path = _data_file("spell-attack")
        case StatType.UNLIMITED_AREA_DAMAGE:
            path = _data_file("unlimited-area-damage")
        case StatType.LIMITED_AREA_DAMAGE:
            path = _data_file("limited-area-damage")
        case _:
            raise ValueError(f"no reference table for statistic {kind!r}")

    return load_table(path)
