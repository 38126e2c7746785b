# bendcalc/section.py
"""
CROSS-SECTION PROPERTIES
========================

Derive the two geometric properties bending needs from a cross-section:

    I (moment of inertia, mm⁴)  - second moment of area about the bending axis
    S (section modulus, mm³)    - I / c, where c = distance to extreme fiber

Each shape family is a frozen dataclass. Construction validates the
dimensions, so a geometry object that exists is always complete:

    Rectangular(width=50, height=100)      I = b·h³/12
    Circular(diameter=100)                 I = π·d⁴/64
    HollowRectangular(...)                 I = [B·H³ - (B-2t)(H-2t)³]/12
    HollowCircular(...)                    I = π·[D⁴ - (D-2t)⁴]/64
    IBeam(...)                             I = b·h³/12 - (b-tw)(h-2tf)³/12
    TBeam(...)                             recognized, no formula yet

For every symmetric shape here the neutral axis is at mid-depth, so
S = I / (depth / 2).

All inputs are millimeters (see units.py).
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Union

import numpy as np

from .errors import IncompleteGeometry, UnimplementedSection

logger = logging.getLogger(__name__)


class SectionKind(str, Enum):
    """Cross-section families."""
    RECTANGULAR = "rectangular"
    CIRCULAR = "circular"
    HOLLOW_RECTANGULAR = "hollow_rectangular"
    HOLLOW_CIRCULAR = "hollow_circular"
    I_BEAM = "i_beam"
    T_BEAM = "t_beam"


def _require_positive(geometry) -> None:
    """Check every dataclass field of a geometry is a finite number > 0."""
    for f in fields(geometry):
        value = getattr(geometry, f.name)
        if value is None:
            raise IncompleteGeometry(
                f"{type(geometry).__name__}: missing required field '{f.name}'"
            )
        if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
            raise IncompleteGeometry(
                f"{type(geometry).__name__}: field '{f.name}' must be a number, got {value!r}"
            )
        if not np.isfinite(value) or value <= 0:
            raise IncompleteGeometry(
                f"{type(geometry).__name__}: field '{f.name}' must be positive, got {value}"
            )


@dataclass(frozen=True)
class Rectangular:
    """Solid rectangle (mm)."""
    width: float
    height: float

    kind = SectionKind.RECTANGULAR

    def __post_init__(self):
        _require_positive(self)


@dataclass(frozen=True)
class Circular:
    """Solid round bar (mm)."""
    diameter: float

    kind = SectionKind.CIRCULAR

    def __post_init__(self):
        _require_positive(self)


@dataclass(frozen=True)
class HollowRectangular:
    """
    Rectangular hollow section with uniform wall (mm).

    The wall must leave an opening: wall_thickness < min(outer_width, outer_height) / 2.
    """
    outer_width: float
    outer_height: float
    wall_thickness: float

    kind = SectionKind.HOLLOW_RECTANGULAR

    def __post_init__(self):
        _require_positive(self)
        if 2.0 * self.wall_thickness >= min(self.outer_width, self.outer_height):
            raise IncompleteGeometry(
                f"HollowRectangular: wall_thickness {self.wall_thickness} must be less than "
                f"half the smaller outer dimension ({min(self.outer_width, self.outer_height) / 2})"
            )


@dataclass(frozen=True)
class HollowCircular:
    """Circular hollow section / tube (mm)."""
    outer_diameter: float
    wall_thickness: float

    kind = SectionKind.HOLLOW_CIRCULAR

    def __post_init__(self):
        _require_positive(self)
        if 2.0 * self.wall_thickness >= self.outer_diameter:
            raise IncompleteGeometry(
                f"HollowCircular: wall_thickness {self.wall_thickness} must be less than "
                f"outer_diameter/2 ({self.outer_diameter / 2})"
            )


@dataclass(frozen=True)
class IBeam:
    """Doubly-symmetric I-section (mm)."""
    height: float
    flange_width: float
    flange_thickness: float
    web_thickness: float

    kind = SectionKind.I_BEAM

    def __post_init__(self):
        _require_positive(self)
        if 2.0 * self.flange_thickness >= self.height:
            raise IncompleteGeometry(
                f"IBeam: flanges overlap (2 × flange_thickness = {2 * self.flange_thickness} "
                f">= height = {self.height})"
            )
        if self.web_thickness >= self.flange_width:
            raise IncompleteGeometry(
                f"IBeam: web_thickness {self.web_thickness} must be less than "
                f"flange_width {self.flange_width}"
            )


@dataclass(frozen=True)
class TBeam:
    """T-section (mm). Accepted as input; no property formula is defined."""
    height: float
    flange_width: float
    flange_thickness: float
    web_thickness: float

    kind = SectionKind.T_BEAM

    def __post_init__(self):
        _require_positive(self)


CrossSection = Union[Rectangular, Circular, HollowRectangular, HollowCircular, IBeam, TBeam]

GEOMETRY_TYPES: Dict[SectionKind, type] = {
    SectionKind.RECTANGULAR: Rectangular,
    SectionKind.CIRCULAR: Circular,
    SectionKind.HOLLOW_RECTANGULAR: HollowRectangular,
    SectionKind.HOLLOW_CIRCULAR: HollowCircular,
    SectionKind.I_BEAM: IBeam,
    SectionKind.T_BEAM: TBeam,
}


@dataclass(frozen=True)
class SectionProperties:
    """Bending properties of a cross-section."""
    moment_of_inertia: float  # mm⁴
    section_modulus: float    # mm³


def coerce_section_kind(kind: Union[SectionKind, str]) -> SectionKind:
    """Accept an enum member or its tag ('i_beam', also 'i-beam')."""
    if isinstance(kind, SectionKind):
        return kind
    try:
        return SectionKind(str(kind).strip().lower().replace("-", "_"))
    except ValueError:
        raise IncompleteGeometry(
            f"Unknown section kind {kind!r}; expected one of {[k.value for k in SectionKind]}"
        ) from None


def make_geometry(kind: Union[SectionKind, str], params: Mapping[str, Any]) -> CrossSection:
    """
    Build a validated geometry from a kind tag and a numeric field map.

    Fields not used by the shape are ignored; every field the shape needs
    must be present.

    Raises:
        IncompleteGeometry: unknown kind, missing field, or invalid dimension
    """
    kind = coerce_section_kind(kind)
    geometry_type = GEOMETRY_TYPES[kind]
    names = [f.name for f in fields(geometry_type)]

    missing = [name for name in names if params.get(name) is None]
    if missing:
        raise IncompleteGeometry(
            f"{geometry_type.__name__}: missing required field(s) {missing}"
        )

    return geometry_type(**{name: params[name] for name in names})


# ============================================================================
# PER-SHAPE FORMULAS
# ============================================================================

def _rectangular(g: Rectangular) -> SectionProperties:
    I = g.width * g.height**3 / 12.0
    return SectionProperties(I, I / (g.height / 2.0))


def _circular(g: Circular) -> SectionProperties:
    I = np.pi * g.diameter**4 / 64.0
    return SectionProperties(I, I / (g.diameter / 2.0))


def _hollow_rectangular(g: HollowRectangular) -> SectionProperties:
    t2 = 2.0 * g.wall_thickness
    I = (
        g.outer_width * g.outer_height**3
        - (g.outer_width - t2) * (g.outer_height - t2)**3
    ) / 12.0
    return SectionProperties(I, I / (g.outer_height / 2.0))


def _hollow_circular(g: HollowCircular) -> SectionProperties:
    inner = g.outer_diameter - 2.0 * g.wall_thickness
    I = np.pi * (g.outer_diameter**4 - inner**4) / 64.0
    return SectionProperties(I, I / (g.outer_diameter / 2.0))


def _i_beam(g: IBeam) -> SectionProperties:
    # Full b×h box minus the two voids beside the web
    h, b = g.height, g.flange_width
    tw, tf = g.web_thickness, g.flange_thickness
    I = b * h**3 / 12.0 - (b - tw) * (h - 2.0 * tf)**3 / 12.0
    return SectionProperties(I, I / (h / 2.0))


def _t_beam(g: TBeam) -> SectionProperties:
    raise UnimplementedSection(
        "T-beam section properties are not implemented: the neutral axis is not at "
        "mid-depth and no formula is defined for this section family"
    )


_FORMULAS: Dict[type, Callable[[Any], SectionProperties]] = {
    Rectangular: _rectangular,
    Circular: _circular,
    HollowRectangular: _hollow_rectangular,
    HollowCircular: _hollow_circular,
    IBeam: _i_beam,
    TBeam: _t_beam,
}


def compute_section_properties(geometry: CrossSection) -> SectionProperties:
    """
    Compute moment of inertia and section modulus of a cross-section.

    Args:
        geometry: One of the geometry dataclasses (dimensions in mm)

    Returns:
        SectionProperties with I in mm⁴ and S in mm³

    Raises:
        IncompleteGeometry: If geometry is not a recognized section object, or
            its dimensions overflow I or S
        UnimplementedSection: For TBeam
    """
    formula = _FORMULAS.get(type(geometry))
    if formula is None:
        raise IncompleteGeometry(f"Not a cross-section geometry: {geometry!r}")

    try:
        props = formula(geometry)
    except OverflowError:
        props = None
    if props is None or not (
        np.isfinite(props.moment_of_inertia) and np.isfinite(props.section_modulus)
    ):
        raise IncompleteGeometry(
            f"{type(geometry).__name__}: dimensions too large for I and S to be finite"
        )

    logger.debug(
        "%s: I=%.6g mm^4, S=%.6g mm^3",
        type(geometry).__name__, props.moment_of_inertia, props.section_modulus,
    )
    return props
