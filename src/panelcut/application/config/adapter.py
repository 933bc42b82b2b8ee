"""Conversion from configuration models to domain value objects."""

from panelcut.application.config.schema import (
    CabinetConfig,
    MaterialConfig,
    ProjectConfiguration,
)
from panelcut.domain import Cabinet, Material


def material_from_config(config: MaterialConfig) -> Material:
    """Build a Material from its configuration model."""
    return Material(
        type=config.type,
        thickness=config.thickness,
        width=config.width,
        height=config.height,
        kerf=config.kerf,
    )


def cabinet_from_config(config: CabinetConfig) -> Cabinet:
    """Build a Cabinet from its configuration model."""
    return Cabinet(
        height=config.height,
        width=config.width,
        depth=config.depth,
        divisions=config.divisions,
        drawer_spacing=config.drawer_spacing,
        assembly_type=config.assembly_type,
        door_style=config.door_style,
        quantity=config.quantity,
    )


def config_to_material(config: ProjectConfiguration) -> Material:
    """Extract the project material."""
    return material_from_config(config.material)


def config_to_cabinets(config: ProjectConfiguration) -> list[Cabinet]:
    """Extract the project cabinets in numbering order."""
    return [cabinet_from_config(c) for c in config.cabinets]
