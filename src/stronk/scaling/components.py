"""
Damage Component Rescaler

After the scaling engine has rescaled the total of a damage specification,
spread the new total back over the original components.

POLICY:
- Absorb the whole change in the FIRST component (the main, usually physical,
  damage) and leave the extra components (elemental riders) untouched.
- If there are at least two components and that would bring the first one to
  zero or below, scale EVERY component proportionally instead:
      component_i' = component_i / old_total × new_total
- A single component always takes the whole change.
"""

import logging

from stronk.core.domain.damage import Damage, DamageComponent
from stronk.core.math.interpolation import ScalingContractViolation
from stronk.core.math.numerical_safeguards import validate_positive

logger = logging.getLogger(__name__)


def scale_all_damage_components(damage: Damage, scaled_total: float) -> Damage:
    """Scale every component by its share of the current total."""
    validate_positive(scaled_total, "scaled_total")

    current_total = damage.total_average_value()
    validate_positive(current_total, "current damage total")

    return Damage(
        components=tuple(
            DamageComponent(
                average_value=component.average_value / current_total * scaled_total,
                damage_type=component.damage_type,
            )
            for component in damage.components
        )
    )


def scale_first_damage_component(damage: Damage, scaled_total: float) -> Damage:
    """Apply the whole change to the first component."""
    validate_positive(scaled_total, "scaled_total")

    first, *rest = damage.components

    if not rest:
        return Damage(
            components=(DamageComponent(average_value=scaled_total, damage_type=first.damage_type),)
        )

    delta = scaled_total - damage.total_average_value()

    if first.average_value + delta <= 0:
        raise ScalingContractViolation(
            f"first component {first.damage_type} would drop to "
            f"{first.average_value + delta}: cannot absorb the change alone"
        )

    scaled_first = DamageComponent(
        average_value=first.average_value + delta,
        damage_type=first.damage_type,
    )
    return Damage(components=(scaled_first, *rest))


def scale_damage_components(damage: Damage, scaled_total: float) -> Damage:
    """
    Redistribute a rescaled damage total over the components of damage.

    Args:
        damage: Damage as parsed at the current level
        scaled_total: New aggregate expected damage, > 0

    Returns:
        New Damage with the same component types, totalling scaled_total

    Raises:
        ValueError: If scaled_total <= 0
    """
    validate_positive(scaled_total, "scaled_total")

    delta = scaled_total - damage.total_average_value()

    if len(damage.components) >= 2 and damage.components[0].average_value + delta <= 0:
        logger.info("damage was greatly decreased: scaling all damage components proportionally")
        return scale_all_damage_components(damage, scaled_total)

    return scale_first_damage_component(damage, scaled_total)
