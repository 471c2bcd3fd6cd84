"""Exceptions raised for LCh values outside the convertible domain."""

__all__ = ["ColorDomainError", "InvalidLightness", "InvalidChroma"]


class ColorDomainError(ValueError):
    """Base exception for colors rejected before conversion."""

    pass


class InvalidLightness(ColorDomainError):
    """Raised when lightness is outside [0, 100]."""

    pass


class InvalidChroma(ColorDomainError):
    """Raised when chroma is negative."""

    pass
