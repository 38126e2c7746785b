# bendcalc/solve.py
"""Peak bending stress and deflection from section, moment, span and material."""

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np

from .errors import DivisionByZero, IncompleteLoadCase
from .loads import (
    AppliedMoment,
    DistributedLoad,
    LoadCase,
    PointLoad,
    SupportCondition,
    check_position,
    check_span,
    coerce_support,
)
from .units import intensity_to_n_per_mm, modulus_to_mpa, moment_to_n_mm, span_to_mm

logger = logging.getLogger(__name__)

SQRT3 = np.sqrt(3.0)


@dataclass(frozen=True)
class StressDeflection:
    max_stress: float      # MPa
    max_deflection: float  # mm


def bending_stress(moment: float, section_modulus: float) -> float:
    """
    Extreme-fiber bending stress σ = M / S.

    Args:
        moment: Peak moment (N·m)
        section_modulus: S (mm³)

    Returns:
        Stress (MPa = N/mm²)

    Raises:
        DivisionByZero: If S <= 0, unless S == 0 and M == 0 (zero stress)
    """
    if section_modulus <= 0:
        if section_modulus == 0 and moment == 0:
            return 0.0
        raise DivisionByZero(
            f"Section modulus S={section_modulus} mm^3 cannot carry moment M={moment} N·m"
        )
    return abs(moment_to_n_mm(moment)) / section_modulus


def _deflection_times_ei(
    load: LoadCase,
    span_length: float,
    support: SupportCondition,
) -> float:
    """
    Closed-form beam table results; dividing by E (MPa) × I (mm⁴) gives mm.

        simply supported
            point      P·b·(L²-b²)^1.5 / (9√3·L),  b = min(a, L-a)
            UDL        5·w·L⁴ / 384
            end moment M0·L² / (9√3)
        cantilever (fixed at x=0)
            point      P·a²·(3L-a) / 6             (tip load: P·L³/3)
            UDL        w·L⁴ / 8
            tip moment M0·L² / 2
    """
    L = span_to_mm(span_length)

    if isinstance(load, PointLoad):
        check_position(load, span_length)
        P = load.magnitude
        a = span_to_mm(load.position_from_support)
        if support == SupportCondition.CANTILEVER:
            return P * a**2 * (3.0 * L - a) / 6.0
        b = min(a, L - a)
        return P * b * (L**2 - b**2) ** 1.5 / (9.0 * SQRT3 * L)

    if isinstance(load, DistributedLoad):
        w = intensity_to_n_per_mm(load.intensity)
        if support == SupportCondition.CANTILEVER:
            return w * L**4 / 8.0
        return 5.0 * w * L**4 / 384.0

    if isinstance(load, AppliedMoment):
        M0 = moment_to_n_mm(load.magnitude)
        if support == SupportCondition.CANTILEVER:
            return M0 * L**2 / 2.0
        return M0 * L**2 / (9.0 * SQRT3)

    raise IncompleteLoadCase(f"Not a load case: {load!r}")


def deflection_times_ei(
    load: LoadCase,
    span_length: float,
    support: SupportCondition,
) -> float:
    """
    Peak deflection multiplied by the flexural rigidity, δ·E·I (N·mm³).

    Raises:
        IncompleteLoadCase: Invalid load, or a span / load too large for a
            finite result
    """
    try:
        value = _deflection_times_ei(load, span_length, support)
    except OverflowError:
        value = np.inf
    if not np.isfinite(value):
        raise IncompleteLoadCase(
            f"{type(load).__name__} on a {span_length:g} m span: deflection is not finite"
        )
    return value


def solve(
    moment_of_inertia: float,
    section_modulus: float,
    moment: float,
    load: LoadCase,
    span_length: float,
    elastic_modulus: float,
    support: Union[SupportCondition, str] = SupportCondition.SIMPLY_SUPPORTED,
) -> StressDeflection:
    """
    Combine section, moment, span and material into stress and deflection.

    Args:
        moment_of_inertia: I (mm⁴)
        section_modulus: S (mm³)
        moment: Peak bending moment (N·m), from compute_peak_moment
        load: The load case that produced the moment
        span_length: L (m)
        elastic_modulus: E (GPa)
        support: Support condition; must match the one used for the moment

    Returns:
        StressDeflection with max_stress (MPa) and max_deflection (mm)

    Raises:
        DivisionByZero: S or I is zero/negative where a nonzero value is needed
            or so small the result is not finite
        IncompleteLoadCase: Invalid span or load, or a deflection too large to
            represent
    """
    span_length = check_span(span_length)
    support = coerce_support(support)

    stress = bending_stress(moment, section_modulus)

    numerator = deflection_times_ei(load, span_length, support)
    rigidity = modulus_to_mpa(elastic_modulus) * moment_of_inertia
    if moment_of_inertia <= 0 or rigidity <= 0:
        if moment_of_inertia == 0 and numerator == 0:
            deflection = 0.0
        else:
            raise DivisionByZero(
                f"Flexural rigidity E·I is zero or negative "
                f"(E={elastic_modulus} GPa, I={moment_of_inertia} mm^4)"
            )
    else:
        deflection = numerator / rigidity

    if not (np.isfinite(stress) and np.isfinite(deflection)):
        raise DivisionByZero(
            f"Section too small for a finite result "
            f"(S={section_modulus} mm^3, I={moment_of_inertia} mm^4)"
        )

    logger.debug("sigma_max=%.6g MPa, delta_max=%.6g mm (%s)",
                 stress, deflection, support.value)
    return StressDeflection(max_stress=float(stress), max_deflection=float(deflection))
