"""Input boundary validation for materials and cabinets.

The panel generator and sheet packer never validate their inputs. Callers
run these checks first so that degenerate designs are rejected with a clear
message instead of producing zero or negative area panels.
"""

from __future__ import annotations

from panelcut.domain.value_objects import Cabinet, Material

# Upper bounds on per-cabinet counts
MAX_DIVISIONS = 50
MAX_QUANTITY = 100


class InvalidDimension(ValueError):
    """Raised when an input field is outside its allowed range.

    Attributes:
        field: Name of the offending field, prefixed by its owner
            (e.g. ``cabinet.width``).
        value: The rejected value.
        requirement: Short description of the violated constraint.
    """

    def __init__(self, field: str, value: float, requirement: str) -> None:
        self.field = field
        self.value = value
        self.requirement = requirement
        super().__init__(f"{field} must be {requirement} (got {value!r})")


def validate_material(material: Material) -> Material:
    """Check that every sheet dimension is strictly positive.

    Returns:
        The material unchanged, for call chaining.

    Raises:
        InvalidDimension: For the first non-positive field found.
    """
    for name in ("thickness", "width", "height", "kerf"):
        value = getattr(material, name)
        if not value > 0:
            raise InvalidDimension(f"material.{name}", value, "positive")
    return material


def validate_cabinet(cabinet: Cabinet) -> Cabinet:
    """Check cabinet dimensions and counts.

    Returns:
        The cabinet unchanged, for call chaining.

    Raises:
        InvalidDimension: For the first field that violates its constraint.
    """
    for name in ("height", "width", "depth"):
        value = getattr(cabinet, name)
        if not value > 0:
            raise InvalidDimension(f"cabinet.{name}", value, "positive")
    if cabinet.divisions < 0:
        raise InvalidDimension("cabinet.divisions", cabinet.divisions, "non-negative")
    if cabinet.divisions > MAX_DIVISIONS:
        raise InvalidDimension(
            "cabinet.divisions", cabinet.divisions, f"at most {MAX_DIVISIONS}"
        )
    if not cabinet.drawer_spacing >= 0:
        raise InvalidDimension(
            "cabinet.drawer_spacing", cabinet.drawer_spacing, "non-negative"
        )
    if cabinet.quantity < 1:
        raise InvalidDimension("cabinet.quantity", cabinet.quantity, "at least 1")
    if cabinet.quantity > MAX_QUANTITY:
        raise InvalidDimension(
            "cabinet.quantity", cabinet.quantity, f"at most {MAX_QUANTITY}"
        )
    return cabinet
