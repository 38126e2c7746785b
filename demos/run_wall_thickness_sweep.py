import numpy as np
import matplotlib.pyplot as plt

from bendcalc import HollowCircular, Circular, compute_section_properties, analyze


def main():
    """
    HOLLOW TUBE: HOW MUCH DOES THE WALL BUY YOU?
    ============================================
    Sweep the wall thickness of a 100 mm tube from very thin up to almost
    solid, and watch the moment of inertia climb toward the solid bar value
    while the bending stress under a fixed load falls.
    """

    # ========================================================================
    # SETUP
    # ========================================================================
    D = 100.0   # Outer diameter (mm)
    L = 3.0     # Span (m)
    w = 5000.0  # UDL (N/m)

    thicknesses = np.linspace(1.0, D / 2 - 0.5, 40)

    I_solid = compute_section_properties(Circular(diameter=D)).moment_of_inertia

    I_values = []
    stresses = []
    deflections = []
    for t in thicknesses:
        props = compute_section_properties(HollowCircular(outer_diameter=D, wall_thickness=t))
        I_values.append(props.moment_of_inertia)

        result = analyze(
            "hollow_circular", {"outer_diameter": D, "wall_thickness": t},
            "distributed", {"intensity": w},
            material="steel",
            span=L,
        )
        stresses.append(result.max_stress)
        deflections.append(result.max_deflection)

    # ========================================================================
    # PRINT RESULTS
    # ========================================================================
    print("Hollow Circular Section - Wall Thickness Sweep")
    print("=" * 50)
    print(f"Solid bar I (mm^4): {I_solid:,.0f}")
    for t, I, s, d in list(zip(thicknesses, I_values, stresses, deflections))[::8]:
        print(f"t = {t:5.1f} mm   I = {I:12,.0f} mm^4 ({I / I_solid:5.1%})   "
              f"sigma = {s:7.2f} MPa   delta = {d:6.2f} mm")

    # ========================================================================
    # DRAW THE PICTURE
    # ========================================================================
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 4))

    ax1.plot(thicknesses, np.array(I_values) / 1e6, 'b-', linewidth=2, label='Tube')
    ax1.axhline(y=I_solid / 1e6, color='k', linestyle='--', alpha=0.5, label='Solid bar')
    ax1.set_xlabel("Wall thickness (mm)")
    ax1.set_ylabel("I (×10⁶ mm⁴)")
    ax1.set_title("Moment of inertia")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    ax2.plot(thicknesses, stresses, 'r-', linewidth=2)
    ax2.set_xlabel("Wall thickness (mm)")
    ax2.set_ylabel("Max stress (MPa)")
    ax2.set_title(f"UDL {w:.0f} N/m over {L:g} m, simply supported")
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
