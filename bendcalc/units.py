# bendcalc/units.py
"""
UNIT NORMALIZATION
==================

Every formula in the engine is written against ONE canonical unit system:

    section dimensions   mm
    span length          m
    force                N
    distributed load     N/m
    moment               N·m
    elastic modulus      GPa

User input arrives either in metric (already canonical) or imperial units.
The caller must say which physical quantity a number represents; we never
guess it from a field name.

    >>> to_canonical(2.0, QuantityKind.LENGTH_SMALL, UnitSystem.IMPERIAL)
    50.8
    >>> to_canonical(39.37, "length_span", "imperial")  # ≈ 1.0 m

The second half of the module holds the homogenization factors the solver
uses to bring canonical quantities into a consistent N-mm-MPa set before
combining them. Keeping them here means no bare ×1000 appears at a use site.
"""

from enum import Enum
from typing import Union

from .errors import InvalidUnitKind


class UnitSystem(str, Enum):
    """Unit system of raw user input."""
    METRIC = "metric"
    IMPERIAL = "imperial"


class QuantityKind(str, Enum):
    """Physical quantity a raw number represents."""
    LENGTH_SMALL = "length_small"          # section dimensions: in -> mm
    LENGTH_SPAN = "length_span"            # beam length / load position: in -> m
    FORCE = "force"                        # lb -> N
    DISTRIBUTED_LOAD = "distributed_load"  # lb/in -> N/m
    MOMENT = "moment"                      # lb·in -> N·m
    MODULUS = "modulus"                    # ksi -> GPa


# ============================================================================
# IMPERIAL -> CANONICAL FACTORS
# ============================================================================

IN_TO_MM = 25.4
MM_PER_M = 1000.0
LB_TO_N = 4.44822
LB_PER_IN_TO_N_PER_M = 175.127   # 4.44822 N/lb × 39.37 in/m
LB_IN_TO_N_M = 0.112985
KSI_TO_GPA = 0.00689476

IMPERIAL_FACTORS = {
    QuantityKind.LENGTH_SMALL: IN_TO_MM,
    QuantityKind.LENGTH_SPAN: IN_TO_MM / MM_PER_M,
    QuantityKind.FORCE: LB_TO_N,
    QuantityKind.DISTRIBUTED_LOAD: LB_PER_IN_TO_N_PER_M,
    QuantityKind.MOMENT: LB_IN_TO_N_M,
    QuantityKind.MODULUS: KSI_TO_GPA,
}


# ============================================================================
# SOLVER HOMOGENIZATION (canonical -> N, mm, MPa)
# ============================================================================

N_MM_PER_N_M = 1000.0      # moment: N·m -> N·mm
MPA_PER_GPA = 1000.0       # modulus: GPa -> MPa (= N/mm²)
N_PER_MM_PER_N_PER_M = 1.0 / MM_PER_M   # distributed load: N/m -> N/mm


def coerce_quantity_kind(kind: Union[QuantityKind, str]) -> QuantityKind:
    try:
        return QuantityKind(kind)
    except ValueError:
        raise InvalidUnitKind(
            f"Unrecognized quantity kind {kind!r}; expected one of "
            f"{[k.value for k in QuantityKind]}"
        ) from None


def coerce_unit_system(system: Union[UnitSystem, str]) -> UnitSystem:
    try:
        return UnitSystem(system)
    except ValueError:
        raise InvalidUnitKind(
            f"Unrecognized unit system {system!r}; expected 'metric' or 'imperial'"
        ) from None


def to_canonical(
    value: float,
    kind: Union[QuantityKind, str],
    system: Union[UnitSystem, str],
) -> float:
    """
    Convert a raw input value into canonical units.

    Args:
        value: Raw numeric value as entered
        kind: Which physical quantity the value represents
        system: Unit system the value was entered in

    Returns:
        Value in canonical units (mm, m, N, N/m, N·m or GPa)

    Raises:
        InvalidUnitKind: If kind or system is not recognized
    """
    kind = coerce_quantity_kind(kind)
    system = coerce_unit_system(system)

    if system == UnitSystem.METRIC:
        return float(value)
    return float(value) * IMPERIAL_FACTORS[kind]


def from_canonical(
    value: float,
    kind: Union[QuantityKind, str],
    system: Union[UnitSystem, str],
) -> float:
    """Inverse of to_canonical: express a canonical value in the given system."""
    kind = coerce_quantity_kind(kind)
    system = coerce_unit_system(system)

    if system == UnitSystem.METRIC:
        return float(value)
    return float(value) / IMPERIAL_FACTORS[kind]


def span_to_mm(span_m: float) -> float:
    return span_m * MM_PER_M


def moment_to_n_mm(moment_n_m: float) -> float:
    return moment_n_m * N_MM_PER_N_M


def modulus_to_mpa(modulus_gpa: float) -> float:
    return modulus_gpa * MPA_PER_GPA


def intensity_to_n_per_mm(intensity_n_per_m: float) -> float:
    return intensity_n_per_m * N_PER_MM_PER_N_PER_M
