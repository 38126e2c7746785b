# bendcalc/config.py
"""
Engine configuration and defaults.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .loads import LoadKind, SupportCondition, coerce_load_kind
from .section import SectionKind, coerce_section_kind
from .units import QuantityKind, UnitSystem, coerce_unit_system, from_canonical


@dataclass
class EngineConfig:
    """Global engine configuration."""

    # Metadata
    app_name: str = "Beam Bending Calculator"
    version: str = "0.1.0"

    # Product-level caveat, shown with every result
    disclaimer: str = (
        "Not to be used for safety critical applications. "
        "No guarantees are made to calculation accuracy."
    )

    # Defaults
    default_unit_system: UnitSystem = UnitSystem.METRIC
    default_support: SupportCondition = SupportCondition.SIMPLY_SUPPORTED
    default_material: str = "steel"
    default_span: float = 2.0  # m

    assumptions: List[str] = None

    # Input form defaults, per unit system
    section_defaults: Dict[str, Dict[str, Dict[str, float]]] = None
    load_defaults: Dict[str, Dict[str, Dict[str, float]]] = None

    def __post_init__(self):
        if self.assumptions is None:
            self.assumptions = [
                "Linear elastic material behavior",
                "Small deflections relative to beam dimensions",
                "No stress concentrations at supports or load points",
            ]
        if self.section_defaults is None:
            self.section_defaults = {
                "metric": {
                    "i_beam": {"height": 200, "flange_width": 100,
                               "flange_thickness": 10, "web_thickness": 6},
                    "rectangular": {"height": 100, "width": 50},
                    "circular": {"diameter": 100},
                    "hollow_rectangular": {"outer_height": 100, "outer_width": 50,
                                           "wall_thickness": 5},
                    "hollow_circular": {"outer_diameter": 100, "wall_thickness": 5},
                    "t_beam": {"height": 100, "flange_width": 50,
                               "flange_thickness": 10, "web_thickness": 6},
                },
                "imperial": {
                    "i_beam": {"height": 7.87, "flange_width": 3.94,
                               "flange_thickness": 0.39, "web_thickness": 0.24},
                    "rectangular": {"height": 3.94, "width": 1.97},
                    "circular": {"diameter": 3.94},
                    "hollow_rectangular": {"outer_height": 3.94, "outer_width": 1.97,
                                           "wall_thickness": 0.2},
                    "hollow_circular": {"outer_diameter": 3.94, "wall_thickness": 0.2},
                    "t_beam": {"height": 3.94, "flange_width": 1.97,
                               "flange_thickness": 0.39, "web_thickness": 0.24},
                },
            }
        if self.load_defaults is None:
            self.load_defaults = {
                "metric": {
                    "point": {"magnitude": 10000, "position_from_support": 1},
                    "distributed": {"intensity": 5000},
                    "moment": {"magnitude": 15000},
                },
                "imperial": {
                    "point": {"magnitude": 2248, "position_from_support": 39.37},
                    "distributed": {"intensity": 57},
                    "moment": {"magnitude": 13300},
                },
            }


# Global config instance
CONFIG = EngineConfig()


def default_section_params(
    kind: Union[SectionKind, str],
    system: Optional[Union[UnitSystem, str]] = None,
) -> Dict[str, float]:
    """Default dimensions for a section kind, in the units of `system`."""
    kind = coerce_section_kind(kind)
    system = coerce_unit_system(CONFIG.default_unit_system if system is None else system)
    return dict(CONFIG.section_defaults[system.value][kind.value])


def default_load_params(
    kind: Union[LoadKind, str],
    system: Optional[Union[UnitSystem, str]] = None,
) -> Dict[str, float]:
    """Default load fields for a load kind, in the units of `system`."""
    kind = coerce_load_kind(kind)
    system = coerce_unit_system(CONFIG.default_unit_system if system is None else system)
    return dict(CONFIG.load_defaults[system.value][kind.value])


def default_span(system: Optional[Union[UnitSystem, str]] = None) -> float:
    """Default span length, in m (metric) or in (imperial)."""
    system = coerce_unit_system(CONFIG.default_unit_system if system is None else system)
    return from_canonical(CONFIG.default_span, QuantityKind.LENGTH_SPAN, system)
