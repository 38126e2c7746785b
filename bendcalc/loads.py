# bendcalc/loads.py
"""
LOAD CASES AND PEAK BENDING MOMENT
==================================

Three load cases on a single span of length L (m):

    PointLoad(magnitude=P, position_from_support=a)   N, m
    DistributedLoad(intensity=w)                      N/m over the full span
    AppliedMoment(magnitude=M0)                       N·m

and two support conditions, always given explicitly:

    SIMPLY_SUPPORTED   pin at x=0, roller at x=L
    CANTILEVER         fixed at x=0, free at x=L

Peak moment (closed form, statically determinate):

                        simply supported        cantilever
    point               P·a·(L-a)/L             P·a
    distributed         w·L²/8                  w·L²/2
    moment              M0                      M0

Sign conventions are dropped: every result is a magnitude.
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Union

import numpy as np

from .errors import IncompleteLoadCase

logger = logging.getLogger(__name__)


class LoadKind(str, Enum):
    POINT = "point"
    DISTRIBUTED = "distributed"
    MOMENT = "moment"


class SupportCondition(str, Enum):
    """Boundary condition of the single span."""
    SIMPLY_SUPPORTED = "simply_supported"
    CANTILEVER = "cantilever"


def _check_number(owner: str, name: str, value, allow_zero: bool = False) -> None:
    if value is None:
        raise IncompleteLoadCase(f"{owner}: missing required field '{name}'")
    if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
        raise IncompleteLoadCase(f"{owner}: field '{name}' must be a number, got {value!r}")
    if not np.isfinite(value):
        raise IncompleteLoadCase(f"{owner}: field '{name}' must be finite, got {value}")
    if value < 0 or (value == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise IncompleteLoadCase(f"{owner}: field '{name}' must be {bound}, got {value}")


@dataclass(frozen=True)
class PointLoad:
    """Concentrated force P (N) at distance a (m) from the left support / fixed end."""
    magnitude: float
    position_from_support: float

    kind = LoadKind.POINT

    def __post_init__(self):
        _check_number("PointLoad", "magnitude", self.magnitude)
        _check_number("PointLoad", "position_from_support", self.position_from_support,
                      allow_zero=True)


@dataclass(frozen=True)
class DistributedLoad:
    """Uniform load w (N/m) over the whole span."""
    intensity: float

    kind = LoadKind.DISTRIBUTED

    def __post_init__(self):
        _check_number("DistributedLoad", "intensity", self.intensity)


@dataclass(frozen=True)
class AppliedMoment:
    """Concentrated couple M0 (N·m) at the free end / one support."""
    magnitude: float

    kind = LoadKind.MOMENT

    def __post_init__(self):
        _check_number("AppliedMoment", "magnitude", self.magnitude)


LoadCase = Union[PointLoad, DistributedLoad, AppliedMoment]

LOAD_TYPES = {
    LoadKind.POINT: PointLoad,
    LoadKind.DISTRIBUTED: DistributedLoad,
    LoadKind.MOMENT: AppliedMoment,
}


def coerce_load_kind(kind: Union[LoadKind, str]) -> LoadKind:
    if isinstance(kind, LoadKind):
        return kind
    try:
        return LoadKind(str(kind).strip().lower())
    except ValueError:
        raise IncompleteLoadCase(
            f"Unknown load kind {kind!r}; expected one of {[k.value for k in LoadKind]}"
        ) from None


def coerce_support(support: Union[SupportCondition, str]) -> SupportCondition:
    if isinstance(support, SupportCondition):
        return support
    try:
        return SupportCondition(str(support).strip().lower().replace("-", "_"))
    except ValueError:
        raise IncompleteLoadCase(
            f"Unknown support condition {support!r}; expected one of "
            f"{[s.value for s in SupportCondition]}"
        ) from None


def make_load_case(kind: Union[LoadKind, str], params: Mapping[str, Any]) -> LoadCase:
    """
    Build a validated load case from a kind tag and a numeric field map.

    Raises:
        IncompleteLoadCase: unknown kind, missing field, or invalid value
    """
    kind = coerce_load_kind(kind)
    load_type = LOAD_TYPES[kind]
    names = [f.name for f in fields(load_type)]

    missing = [name for name in names if params.get(name) is None]
    if missing:
        raise IncompleteLoadCase(f"{load_type.__name__}: missing required field(s) {missing}")

    return load_type(**{name: params[name] for name in names})


def check_span(span_length: float) -> float:
    """Validate a span length (m) and return it as float."""
    _check_number("Span", "span_length", span_length)
    return float(span_length)


def check_position(load: PointLoad, span_length: float) -> None:
    if load.position_from_support > span_length:
        raise IncompleteLoadCase(
            f"PointLoad: position_from_support {load.position_from_support} m lies "
            f"outside the span [0, {span_length}] m"
        )


def compute_peak_moment(
    load: LoadCase,
    span_length: float,
    support: Union[SupportCondition, str] = SupportCondition.SIMPLY_SUPPORTED,
) -> float:
    """
    Peak bending moment along the span.

    Args:
        load: PointLoad, DistributedLoad or AppliedMoment
        span_length: L (m), must be > 0
        support: Support condition (default simply supported)

    Returns:
        Peak moment magnitude (N·m)

    Raises:
        IncompleteLoadCase: bad span, point load off the span, unknown load, or a
            peak moment too large to represent
    """
    L = check_span(span_length)
    support = coerce_support(support)
    cantilever = support == SupportCondition.CANTILEVER

    if isinstance(load, PointLoad):
        check_position(load, L)
        P, a = load.magnitude, load.position_from_support
        M = P * a if cantilever else P * a * (L - a) / L
    elif isinstance(load, DistributedLoad):
        w = load.intensity
        try:
            M = w * L**2 / 2.0 if cantilever else w * L**2 / 8.0
        except OverflowError:
            M = np.inf
    elif isinstance(load, AppliedMoment):
        M = load.magnitude
    else:
        raise IncompleteLoadCase(f"Not a load case: {load!r}")

    if not np.isfinite(M):
        raise IncompleteLoadCase(
            f"{type(load).__name__} on a {L:g} m span: peak moment is not finite"
        )

    logger.debug("%s on %s span L=%g m: M_max=%.6g N·m",
                 type(load).__name__, support.value, L, M)
    return float(M)
