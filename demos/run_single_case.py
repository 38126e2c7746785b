import argparse

from bendcalc import (
    CONFIG,
    BeamAnalysisError,
    LoadKind,
    SectionKind,
    analyze,
    default_load_params,
    default_section_params,
    default_span,
)


def main():
    parser = argparse.ArgumentParser(description="Run one beam with the input form defaults")
    parser.add_argument("--section", default="i_beam", choices=[k.value for k in SectionKind])
    parser.add_argument("--load", default="point", choices=[k.value for k in LoadKind])
    parser.add_argument("--material", default=CONFIG.default_material)
    parser.add_argument("--span", type=float, default=None,
                        help="Span (m, or in with --imperial)")
    parser.add_argument("--support", default=CONFIG.default_support.value,
                        choices=["simply_supported", "cantilever"])
    parser.add_argument("--imperial", action="store_true")
    args = parser.parse_args()

    system = "imperial" if args.imperial else "metric"
    span = args.span
    if span is None:
        span = default_span(system)

    section_params = default_section_params(args.section, system)
    load_params = default_load_params(args.load, system)
    print(f"Section ({system}): {section_params}")
    print(f"Load ({system}): {load_params}")
    print()

    try:
        result = analyze(
            args.section, section_params,
            args.load, load_params,
            material=args.material,
            span=span,
            unit_system=system,
            support=args.support,
        )
    except BeamAnalysisError as e:
        print(f"{type(e).__name__}: {e}")
        raise SystemExit(1)

    print(result.summary())


if __name__ == "__main__":
    main()
