# bendcalc/errors.py
"""Exception hierarchy for the beam analysis engine."""


class BeamAnalysisError(ValueError):
    """Base class for every recoverable input or evaluation failure."""
    pass


class InvalidUnitKind(BeamAnalysisError):
    """Raised when a quantity kind or unit system is not recognized."""
    pass


class IncompleteGeometry(BeamAnalysisError):
    """Raised when a cross-section field is missing, non-positive or inconsistent."""
    pass


class IncompleteLoadCase(BeamAnalysisError):
    """Raised when a load field is missing or non-positive, or the span is not positive."""
    pass


class InvalidMaterial(BeamAnalysisError):
    """Raised for non-positive material constants or an unknown catalog name."""
    pass


class DivisionByZero(BeamAnalysisError, ZeroDivisionError):
    """Raised when S or I is zero (or negative) where a nonzero value is required."""
    pass


class UnimplementedSection(BeamAnalysisError, NotImplementedError):
    """Raised for a recognized section family that has no property formula."""
    pass
