"""Exceptions raised by the measurement core and configuration loading."""


class MeasurementError(Exception):
    """Base class for measurement failures"""


class DegenerateAxisError(MeasurementError):
    """Triradiate points coincide, so no reference axis can be built"""

    def __init__(self, separation=0.0):
        super().__init__(
            f"Triradiate points are too close ({separation:.3g}); "
            "cannot compute, re-mark triradiate points"
        )
        self.separation = separation


class DegenerateHeadWidthError(MeasurementError):
    """Lateral and medial femoral head edges project onto the same spot"""

    def __init__(self, side, width=0.0):
        super().__init__(
            f"Femoral head width on the {side} side is degenerate ({width:.3g}); "
            "re-mark the femoral head edges"
        )
        self.side = side
        self.width = width


class IncompleteInputError(MeasurementError):
    """Calculation requested with fewer than the required points"""

    def __init__(self, count, required):
        super().__init__(f"Need {required} points to compute, got {count}")
        self.count = count
        self.required = required


class ConfigError(ValueError):
    """Configuration file failed validation"""

    def __init__(self, errors, path=None):
        self.errors = list(errors)
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"Invalid configuration{where}: " + "; ".join(self.errors))
