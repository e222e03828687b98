"""Proficiency — ordered rank attached to each column of a reference table."""

from enum import IntEnum


class Proficiency(IntEnum):
    """
    Proficiency rank, ordered Terrible < Low < Moderate < High < Extreme.

    Serialized in table data by its title-case label ("Moderate").
    """

    TERRIBLE = 0
    LOW = 1
    MODERATE = 2
    HIGH = 3
    EXTREME = 4

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def from_label(cls, label: str) -> "Proficiency":
        """
        Parse a table label, case-insensitively.

        Raises:
            ValueError: If the label is not a proficiency rank
        """
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown proficiency: {label}") from None

    def __str__(self) -> str:
        return self.label
