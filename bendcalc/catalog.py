# bendcalc/catalog.py
"""
CATALOG: MATERIAL PROPERTIES
============================

Bending needs two material constants:

- E (elastic modulus, GPa): how stiff the material is -> deflection
- f_y (yield strength, MPa): the stress at which linear behavior ends.
  We only report max_stress / f_y as information; nothing here certifies
  a member as safe.

Density (kg/m³) is optional and carried for display / self-weight estimates
made by the caller.

Values come either from the fixed catalog below (steel, aluminum, wood) or
from a user-entered MaterialProperties(...). Catalog entries are static
configuration data.
"""

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from .errors import InvalidMaterial


@dataclass(frozen=True)
class MaterialProperties:
    """
    Linear elastic material.

    Parameters:
    -----------
    name : str
        Human-readable name (e.g., "Steel", "Custom")
    elastic_modulus : float
        Young's modulus (GPa), > 0
        - Steel: ~200 GPa
        - Aluminum: ~69 GPa
        - Timber: ~10-15 GPa
    yield_strength : float
        Yield (or allowable bending) strength (MPa), > 0
    density : float, optional
        kg/m³, >= 0 when given
    """
    name: str
    elastic_modulus: float  # GPa
    yield_strength: float  # MPa
    density: Optional[float] = None  # kg/m³

    def __post_init__(self):
        for field_name in ("elastic_modulus", "yield_strength"):
            value = getattr(self, field_name)
            if (value is None or isinstance(value, bool)
                    or not isinstance(value, (int, float, np.number))
                    or not np.isfinite(value) or value <= 0):
                raise InvalidMaterial(
                    f"Material '{self.name}': {field_name} must be a positive number, got {value!r}"
                )
        if self.density is not None:
            if (isinstance(self.density, bool)
                    or not isinstance(self.density, (int, float, np.number))
                    or not np.isfinite(self.density) or self.density < 0):
                raise InvalidMaterial(
                    f"Material '{self.name}': density must be >= 0, got {self.density!r}"
                )


# ============================================================================
# MATERIAL DEFINITIONS
# ============================================================================

STEEL = MaterialProperties(
    name="Steel",
    elastic_modulus=200.0,   # structural steel
    yield_strength=250.0,    # mild steel (S235 / A36 range)
    density=7850.0,
)

ALUMINUM = MaterialProperties(
    name="Aluminum",
    elastic_modulus=69.0,    # 6061-T6
    yield_strength=276.0,
    density=2700.0,
)

WOOD = MaterialProperties(
    name="Wood",
    elastic_modulus=12.0,    # Douglas Fir, structural grade
    yield_strength=14.5,     # allowable bending stress
    density=550.0,
)

MATERIALS: Dict[str, MaterialProperties] = {
    "steel": STEEL,
    "aluminum": ALUMINUM,
    "wood": WOOD,
}


def get_material(name: str) -> MaterialProperties:
    """
    Look up a catalog material by name (case-insensitive).

    Raises:
        InvalidMaterial: If the name is not in the catalog
    """
    key = str(name).strip().lower()
    # 'aluminium' spelling
    if key == "aluminium":
        key = "aluminum"
    try:
        return MATERIALS[key]
    except KeyError:
        raise InvalidMaterial(
            f"Unknown material {name!r}; catalog has {sorted(MATERIALS)}"
        ) from None
