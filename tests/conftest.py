"""Pytest configuration and shared fixtures for panelcut tests."""

from __future__ import annotations

import pytest

from panelcut.domain import Cabinet, Material, Panel, PanelGenerator
from panelcut.infrastructure import SheetPacker


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def default_cabinet() -> Cabinet:
    """The 720 x 600 x 580 base cabinet with one shelf."""
    return Cabinet(height=720, width=600, depth=580, divisions=1, quantity=1)


@pytest.fixture
def default_material() -> Material:
    """A 2440 x 1220 sheet of 18mm MDF."""
    return Material()


@pytest.fixture
def generator() -> PanelGenerator:
    return PanelGenerator()


@pytest.fixture
def packer() -> SheetPacker:
    return SheetPacker()


@pytest.fixture
def default_panels(generator: PanelGenerator, default_cabinet: Cabinet) -> tuple[Panel, ...]:
    """Panels generated for the default cabinet as cabinet 1."""
    return generator.generate(default_cabinet, 1)
