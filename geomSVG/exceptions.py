"""
Exception types raised by geomSVG.

All library errors derive from GeomSVGError. The concrete errors also
derive from ValueError, so callers that only catch ValueError (the
convention for bad numeric input) keep working.
"""


class GeomSVGError(Exception):
    """Base class for geomSVG errors."""


class UnsupportedDegreeError(GeomSVGError, ValueError):
    """
    Raised when a curve of an unsupported degree is decomposed.

    Attributes:
        degree: Degree of the rejected curve
        supported: Degree the decomposer accepts
    """

    def __init__(self, degree: int, supported: int = 3):
        self.degree = degree
        self.supported = supported
        super().__init__(
            f"Only degree {supported} NURBS curves can be exported to SVG, "
            f"got degree {degree}"
        )


class InvalidFileNameError(GeomSVGError, ValueError):
    """Raised when an export file name is not a valid file name."""

    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        super().__init__(f"Invalid file name {file_name!r}: {reason}")


class SceneFormatError(GeomSVGError, ValueError):
    """Raised for malformed scene or configuration files."""
