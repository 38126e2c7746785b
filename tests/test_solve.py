# File: tests/test_solve.py
"""
TEST: STRESS AND DEFLECTION SOLVER
==================================

Deflection closed forms are checked two ways:

1. Against the classic beam-table results in SI units (N, m, Pa), e.g.
   cantilever tip load δ = PL³/(3EI), simply supported midspan load
   δ = PL³/(48EI), simply supported UDL δ = 5wL⁴/(384EI).

2. Against the full elastic curve y(x), sampled densely with numpy, for the
   cases where the peak is not at an obvious location (off-center point
   load, end moment).

The solver works in N, mm, MPa internally; here we compute the SI reference
in meters and compare in millimeters.
"""

import numpy as np
import pytest

from bendcalc.errors import DivisionByZero, IncompleteLoadCase
from bendcalc.loads import (
    AppliedMoment,
    DistributedLoad,
    PointLoad,
    SupportCondition,
    compute_peak_moment,
)
from bendcalc.solve import bending_stress, solve

# Beam used throughout (same numbers as a 3 m steel member)
L = 3.0            # m
E_GPA = 200.0      # GPa
E = E_GPA * 1e9    # Pa
I_MM4 = 8.0e6      # mm⁴
I = I_MM4 * 1e-12  # m⁴
S_MM3 = 1.0e5      # mm³


def _run(load, support):
    M = compute_peak_moment(load, L, support)
    return M, solve(I_MM4, S_MM3, M, load, L, E_GPA, support)


# ============================================================================
# STRESS
# ============================================================================

def test_stress_unit_homogenization():
    """σ = M·1000 / S: N·m over mm³ gives MPa directly."""
    assert bending_stress(5625.0, 83_333.333) == pytest.approx(67.5, rel=1e-6)
    assert bending_stress(1.0, 1000.0) == pytest.approx(1.0)


def test_stress_matches_si():
    load = DistributedLoad(5000.0)
    M, result = _run(load, SupportCondition.SIMPLY_SUPPORTED)
    sigma_pa = M / (S_MM3 * 1e-9)
    assert result.max_stress == pytest.approx(sigma_pa / 1e6)


# ============================================================================
# DEFLECTION: BEAM TABLES
# ============================================================================

def test_cantilever_tip_load_deflection():
    """δ = PL³/(3EI) for a tip load on a cantilever."""
    P = 1000.0
    _, result = _run(PointLoad(P, L), SupportCondition.CANTILEVER)

    uy_expected = P * L**3 / (3 * E * I)  # m
    assert np.isclose(result.max_deflection, uy_expected * 1000, rtol=1e-10)
    assert result.max_deflection == pytest.approx(5.625)
    print(f"✓ Cantilever tip deflection: {result.max_deflection:.4f} mm")


def test_cantilever_udl_and_moment():
    w, M0 = 2000.0, 1500.0
    _, udl = _run(DistributedLoad(w), SupportCondition.CANTILEVER)
    _, mom = _run(AppliedMoment(M0), SupportCondition.CANTILEVER)

    assert np.isclose(udl.max_deflection, w * L**4 / (8 * E * I) * 1000, rtol=1e-10)
    assert np.isclose(mom.max_deflection, M0 * L**2 / (2 * E * I) * 1000, rtol=1e-10)


def test_cantilever_interior_point_load():
    """Tip deflection for a load at a from the fixed end: P·a²(3L-a)/(6EI)."""
    P, a = 1000.0, 1.2
    _, result = _run(PointLoad(P, a), SupportCondition.CANTILEVER)
    expected = P * a**2 * (3 * L - a) / (6 * E * I)
    assert np.isclose(result.max_deflection, expected * 1000, rtol=1e-10)


def test_simply_supported_midspan_point_load():
    """δ = PL³/(48EI) at midspan."""
    P = 1000.0
    _, result = _run(PointLoad(P, L / 2), SupportCondition.SIMPLY_SUPPORTED)

    expected = P * L**3 / (48 * E * I)
    assert np.isclose(result.max_deflection, expected * 1000, rtol=1e-10)


def test_simply_supported_udl_deflection():
    """δ = 5wL⁴/(384EI) at midspan."""
    w = 5000.0
    _, result = _run(DistributedLoad(w), SupportCondition.SIMPLY_SUPPORTED)

    expected = 5 * w * L**4 / (384 * E * I)
    assert np.isclose(result.max_deflection, expected * 1000, rtol=1e-10)


# ============================================================================
# DEFLECTION: ELASTIC CURVE
# ============================================================================

def _simply_supported_point_curve(P, a, x):
    """Elastic curve y(x) (m) for a point load at a on a simple span."""
    b = L - a
    left = P * b * x * (L**2 - b**2 - x**2) / (6 * L * E * I)
    xr = L - x
    right = P * a * xr * (L**2 - a**2 - xr**2) / (6 * L * E * I)
    return np.where(x <= a, left, right)


@pytest.mark.parametrize("a", [0.3, 0.9, 1.5, 2.2, 2.9])
def test_simply_supported_off_center_point_load(a):
    """The peak of the sampled elastic curve matches the closed form."""
    P = 1000.0
    x = np.linspace(0.0, L, 200001)
    peak = np.max(np.abs(_simply_supported_point_curve(P, a, x)))

    _, result = _run(PointLoad(P, a), SupportCondition.SIMPLY_SUPPORTED)
    assert np.isclose(result.max_deflection, peak * 1000, rtol=1e-6)


def test_simply_supported_end_moment():
    """End couple M0 at x=0: y = M0·x(L-x)(2L-x)/(6EIL), peak M0L²/(9√3 EI)."""
    M0 = 1500.0
    x = np.linspace(0.0, L, 200001)
    curve = M0 * x * (L - x) * (2 * L - x) / (6 * E * I * L)

    _, result = _run(AppliedMoment(M0), SupportCondition.SIMPLY_SUPPORTED)
    assert np.isclose(result.max_deflection, np.max(curve) * 1000, rtol=1e-6)


def test_point_load_at_support_gives_zero():
    """A load right on a support bends nothing: legitimate zero, not an error."""
    M, result = _run(PointLoad(1000.0, 0.0), SupportCondition.SIMPLY_SUPPORTED)
    assert M == 0.0
    assert result.max_stress == 0.0
    assert result.max_deflection == 0.0


# ============================================================================
# DIVISION BY ZERO
# ============================================================================

def test_zero_section_modulus_with_moment_raises():
    """S = 0 under a nonzero moment is an error, distinct from zero stress."""
    with pytest.raises(DivisionByZero):
        bending_stress(100.0, 0.0)
    with pytest.raises(DivisionByZero):
        solve(I_MM4, 0.0, 100.0, DistributedLoad(1.0), L, E_GPA)
    with pytest.raises(ZeroDivisionError):
        bending_stress(100.0, 0.0)


def test_zero_section_modulus_without_moment_is_zero():
    assert bending_stress(0.0, 0.0) == 0.0


def test_negative_section_modulus_raises():
    with pytest.raises(DivisionByZero):
        bending_stress(0.0, -1.0)


def test_zero_inertia_with_load_raises():
    with pytest.raises(DivisionByZero):
        solve(0.0, S_MM3, 100.0, DistributedLoad(1.0), L, E_GPA)


def test_zero_inertia_without_deflection_is_zero():
    result = solve(0.0, 0.0, 0.0, PointLoad(1000.0, 0.0), L, E_GPA)
    assert result.max_stress == 0.0
    assert result.max_deflection == 0.0


# ============================================================================
# OUT OF RANGE
# ============================================================================

@pytest.mark.parametrize("load, span", [
    (DistributedLoad(1.0), 1e80),
    (AppliedMoment(1.0), 1e160),
])
def test_overflowing_deflection_reported(load, span):
    """A span whose L⁴ (or L²) overflows gives a typed error, not OverflowError."""
    with pytest.raises(IncompleteLoadCase, match="not finite"):
        solve(I_MM4, S_MM3, 1.0, load, span, E_GPA)
