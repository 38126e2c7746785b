# bendcalc - Beam Bending Calculator
"""
BENDCALC: Closed-Form Beam Bending Engine
=========================================

This package provides:
- Section properties (I, S) for six cross-section families
- Peak bending moment for point, distributed and applied-moment load cases
- Peak bending stress and deflection for simply supported and cantilever spans
- Imperial/metric input normalization

ARCHITECTURE:
-------------
    units.py        Unit normalization (imperial/metric -> canonical)
    section.py      Cross-section geometry and I / S formulas
    loads.py        Load cases, support conditions, peak moment
    catalog.py      Material properties and the material catalog
    solve.py        Stress and deflection solver
    engine.py       analyze(): the one call a presentation layer needs
    config.py       Defaults, disclaimer, modelling assumptions
    errors.py       Exception hierarchy

Results are not certified for safety-critical use.
"""

from .catalog import MATERIALS, MaterialProperties, get_material
from .config import CONFIG, default_load_params, default_section_params, default_span
from .engine import AnalysisResult, analyze
from .errors import (
    BeamAnalysisError,
    DivisionByZero,
    IncompleteGeometry,
    IncompleteLoadCase,
    InvalidMaterial,
    InvalidUnitKind,
    UnimplementedSection,
)
from .loads import (
    AppliedMoment,
    DistributedLoad,
    LoadKind,
    PointLoad,
    SupportCondition,
    compute_peak_moment,
    make_load_case,
)
from .section import (
    Circular,
    HollowCircular,
    HollowRectangular,
    IBeam,
    Rectangular,
    SectionKind,
    SectionProperties,
    TBeam,
    compute_section_properties,
    make_geometry,
)
from .solve import StressDeflection, solve
from .units import QuantityKind, UnitSystem, from_canonical, to_canonical

__version__ = "0.1.0"

__all__ = [
    # Engine
    'analyze',
    'AnalysisResult',
    'CONFIG',
    'default_section_params',
    'default_load_params',
    'default_span',
    # Units
    'UnitSystem',
    'QuantityKind',
    'to_canonical',
    'from_canonical',
    # Sections
    'SectionKind',
    'SectionProperties',
    'Rectangular',
    'Circular',
    'HollowRectangular',
    'HollowCircular',
    'IBeam',
    'TBeam',
    'make_geometry',
    'compute_section_properties',
    # Loads
    'LoadKind',
    'SupportCondition',
    'PointLoad',
    'DistributedLoad',
    'AppliedMoment',
    'make_load_case',
    'compute_peak_moment',
    # Materials
    'MaterialProperties',
    'MATERIALS',
    'get_material',
    # Solver
    'StressDeflection',
    'solve',
    # Errors
    'BeamAnalysisError',
    'InvalidUnitKind',
    'IncompleteGeometry',
    'IncompleteLoadCase',
    'InvalidMaterial',
    'DivisionByZero',
    'UnimplementedSection',
]
