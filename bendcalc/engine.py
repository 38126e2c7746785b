# bendcalc/engine.py
"""
BEAM ANALYSIS ENGINE
====================

The single entry point a presentation layer calls:

    result = analyze(
        "rectangular", {"width": 50, "height": 100},
        "distributed", {"intensity": 5000},
        material="steel",
        span=3.0,
        unit_system="metric",
    )
    result.max_stress      # MPa
    result.max_deflection  # mm

Pipeline (one way, nothing cached between calls):

    raw input ──> units.to_canonical ──> make_geometry ──> compute_section_properties ─┐
                                    └──> make_load_case ──> compute_peak_moment ───────┤
                                                                                       ├──> solve ──> AnalysisResult
    material (catalog name / MaterialProperties / mapping) ────────────────────────────┘

Every call re-derives everything from its inputs, so it can be used from any
number of callers at once.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import numpy as np

from .catalog import MaterialProperties, get_material
from .config import CONFIG
from .errors import InvalidMaterial
from .loads import (
    LoadKind,
    SupportCondition,
    check_span,
    coerce_load_kind,
    coerce_support,
    compute_peak_moment,
    make_load_case,
)
from .section import SectionKind, coerce_section_kind, compute_section_properties, make_geometry
from .solve import solve
from .units import QuantityKind, UnitSystem, coerce_unit_system, to_canonical

logger = logging.getLogger(__name__)

MaterialInput = Union[MaterialProperties, str, Mapping[str, Any]]

# Which physical quantity each load field carries
LOAD_FIELD_KINDS: Dict[LoadKind, Dict[str, QuantityKind]] = {
    LoadKind.POINT: {
        "magnitude": QuantityKind.FORCE,
        "position_from_support": QuantityKind.LENGTH_SPAN,
    },
    LoadKind.DISTRIBUTED: {
        "intensity": QuantityKind.DISTRIBUTED_LOAD,
    },
    LoadKind.MOMENT: {
        "magnitude": QuantityKind.MOMENT,
    },
}


@dataclass(frozen=True)
class AnalysisResult:
    """Bending response of one beam, all values non-negative, canonical units."""
    moment_of_inertia: float    # mm⁴
    section_modulus: float      # mm³
    max_bending_moment: float   # N·m
    max_stress: float           # MPa
    max_deflection: float       # mm

    # What was analyzed
    section_kind: str
    load_kind: str
    support: str
    span: float                 # m
    material: str

    yield_utilization: float    # max_stress / yield_strength, informational only
    disclaimer: str = CONFIG.disclaimer
    assumptions: Tuple[str, ...] = field(default_factory=lambda: tuple(CONFIG.assumptions))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        """Plain-text result block for display."""
        lines = [
            f"Calculation Results: {self.section_kind} under {self.load_kind} load "
            f"({self.support}, L = {self.span:g} m, {self.material})",
            f"  Maximum Stress:     {self.max_stress:.3f} MPa",
            f"  Maximum Deflection: {self.max_deflection:.2f} mm",
            f"  Moment of Inertia:  {self.moment_of_inertia:.2f} mm^4",
            f"  Section Modulus:    {self.section_modulus:.2f} mm^3",
            f"  Peak Moment:        {self.max_bending_moment:.2f} N·m",
            f"  Stress / Yield:     {self.yield_utilization:.3f}",
            "",
            "Assumes: " + "; ".join(self.assumptions),
            self.disclaimer,
        ]
        return "\n".join(lines)


def _is_number(value) -> bool:
    return isinstance(value, (int, float, np.number)) and not isinstance(value, bool)


def _convert(value, kind: QuantityKind, system: UnitSystem):
    # Non-numeric values pass through untouched so validation reports them
    if not _is_number(value):
        return value
    return to_canonical(value, kind, system)


def convert_section_params(
    params: Mapping[str, Any],
    system: Union[UnitSystem, str],
) -> Dict[str, Any]:
    """Every section field is a small length (in -> mm)."""
    system = coerce_unit_system(system)
    return {
        name: _convert(value, QuantityKind.LENGTH_SMALL, system)
        for name, value in params.items()
    }


def convert_load_params(
    kind: Union[LoadKind, str],
    params: Mapping[str, Any],
    system: Union[UnitSystem, str],
) -> Dict[str, Any]:
    """Convert the load fields of `kind`; unknown extra fields are dropped."""
    kind = coerce_load_kind(kind)
    system = coerce_unit_system(system)
    return {
        name: _convert(params.get(name), quantity, system)
        for name, quantity in LOAD_FIELD_KINDS[kind].items()
    }


def resolve_material(material: Optional[MaterialInput]) -> MaterialProperties:
    """
    Accept a catalog name, a MaterialProperties, or a mapping of custom values.

    Material constants are always canonical: E in GPa, yield strength in MPa.
    """
    if material is None:
        return get_material(CONFIG.default_material)
    if isinstance(material, MaterialProperties):
        return material
    if isinstance(material, str):
        return get_material(material)
    if isinstance(material, Mapping):
        return MaterialProperties(
            name=material.get("name", "Custom"),
            elastic_modulus=material.get("elastic_modulus"),
            yield_strength=material.get("yield_strength"),
            density=material.get("density"),
        )
    raise InvalidMaterial(f"Cannot interpret material {material!r}")


def analyze(
    section_kind: Union[SectionKind, str],
    section_params: Mapping[str, Any],
    load_kind: Union[LoadKind, str],
    load_params: Mapping[str, Any],
    material: Optional[MaterialInput],
    span: float,
    unit_system: Optional[Union[UnitSystem, str]] = None,
    support: Optional[Union[SupportCondition, str]] = None,
) -> AnalysisResult:
    """
    Run one complete bending analysis.

    Args:
        section_kind: Cross-section family tag (e.g. "rectangular", "i_beam")
        section_params: Section dimensions, in mm (metric) or in (imperial)
        load_kind: "point", "distributed" or "moment"
        load_params: Load fields, in metric or imperial units
        material: Catalog name, MaterialProperties, or mapping (GPa / MPa)
        span: Span length, m (metric) or in (imperial)
        unit_system: "metric" or "imperial" (default CONFIG.default_unit_system)
        support: "simply_supported" or "cantilever" (default CONFIG.default_support)

    Returns:
        AnalysisResult in canonical units

    Raises:
        InvalidUnitKind, IncompleteGeometry, IncompleteLoadCase,
        InvalidMaterial, DivisionByZero, UnimplementedSection
    """
    if unit_system is None:
        unit_system = CONFIG.default_unit_system
    if support is None:
        support = CONFIG.default_support
    system = coerce_unit_system(unit_system)
    support = coerce_support(support)
    section_kind = coerce_section_kind(section_kind)
    load_kind = coerce_load_kind(load_kind)

    # 1. Units
    span_m = check_span(_convert(span, QuantityKind.LENGTH_SPAN, system))
    section_canonical = convert_section_params(section_params or {}, system)
    load_canonical = convert_load_params(load_kind, load_params or {}, system)

    # 2. Value objects
    geometry = make_geometry(section_kind, section_canonical)
    load = make_load_case(load_kind, load_canonical)
    mat = resolve_material(material)

    # 3. Section properties and peak moment
    props = compute_section_properties(geometry)
    moment = compute_peak_moment(load, span_m, support)

    # 4. Stress and deflection
    response = solve(
        props.moment_of_inertia,
        props.section_modulus,
        moment,
        load,
        span_m,
        mat.elastic_modulus,
        support,
    )

    result = AnalysisResult(
        moment_of_inertia=props.moment_of_inertia,
        section_modulus=props.section_modulus,
        max_bending_moment=moment,
        max_stress=response.max_stress,
        max_deflection=response.max_deflection,
        section_kind=section_kind.value,
        load_kind=load_kind.value,
        support=support.value,
        span=span_m,
        material=mat.name,
        yield_utilization=response.max_stress / mat.yield_strength,
    )
    logger.debug("analyze(%s, %s, %s): sigma=%.4g MPa, delta=%.4g mm",
                 section_kind.value, load_kind.value, support.value,
                 result.max_stress, result.max_deflection)
    return result
