"""Colors in RGB, CIE XYZ and CIE L*a*b* space, with conversions between them."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


def _int_max(bits: int) -> int:
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")
    return (1 << bits) - 1


def to_int(value: float, bits: int) -> int:
    """Scale a normalized value to an unsigned integer of the given width."""
    top = _int_max(bits)
    base = top + 1.0
    return int(min(max(math.floor(value * base), 0.0), float(top)))


def to_double(value: int, bits: int) -> float:
    """Normalize an unsigned integer of the given width to [0, 1]."""
    return float(value) / float(_int_max(bits))


class ColorSpace(enum.Enum):
    """Color spaces a color may be expressed in."""

    RGB = "RGB"
    XYZ = "XYZ"
    LAB = "LAB"


# D65 reference white.
_WHITE = (0.95047, 1.0, 1.08883)
_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def _linearize(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _compand(c: float) -> float:
    if c <= 0.0031308:
        return c * 12.92
    return 1.055 * c ** (1.0 / 2.4) - 0.055


def _rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    r, g, b = _linearize(r), _linearize(g), _linearize(b)
    return (
        0.4124564 * r + 0.3575761 * g + 0.1804375 * b,
        0.2126729 * r + 0.7151522 * g + 0.0721750 * b,
        0.0193339 * r + 0.1191920 * g + 0.9503041 * b,
    )


def _xyz_to_rgb(x: float, y: float, z: float) -> tuple[float, float, float]:
    r = 3.2404542 * x - 1.5371385 * y - 0.4985314 * z
    g = -0.9692660 * x + 1.8760108 * y + 0.0415560 * z
    b = 0.0556434 * x - 0.2040259 * y + 1.0572252 * z
    return _compand(r), _compand(g), _compand(b)


def _lab_f(t: float) -> float:
    if t > _EPSILON:
        return t ** (1.0 / 3.0)
    return (_KAPPA * t + 16.0) / 116.0


def _xyz_to_lab(x: float, y: float, z: float) -> tuple[float, float, float]:
    fx = _lab_f(x / _WHITE[0])
    fy = _lab_f(y / _WHITE[1])
    fz = _lab_f(z / _WHITE[2])
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


def _lab_finv(f: float) -> float:
    cube = f**3
    if cube > _EPSILON:
        return cube
    return (116.0 * f - 16.0) / _KAPPA


def _lab_to_xyz(lum: float, a: float, b: float) -> tuple[float, float, float]:
    fy = (lum + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    y = fy**3 if lum > _KAPPA * _EPSILON else lum / _KAPPA
    return _lab_finv(fx) * _WHITE[0], y * _WHITE[1], _lab_finv(fz) * _WHITE[2]


@dataclass(frozen=True)
class Color:
    """A three-component color in a given color space."""

    r: float
    g: float
    b: float
    space: ColorSpace = ColorSpace.RGB

    def to_ints(self, bits: int) -> tuple[int, int, int]:
        """Components as unsigned integers of the given width."""
        for component in (self.r, self.g, self.b):
            if not 0.0 <= component <= 1.0:
                raise ValueError(f"component {component} is not normalized")
        return to_int(self.r, bits), to_int(self.g, bits), to_int(self.b, bits)

    @classmethod
    def from_ints(
        cls, r: int, g: int, b: int, bits: int, space: ColorSpace = ColorSpace.RGB
    ) -> Color:
        """Build a color from unsigned integer components of the given width."""
        return cls(to_double(r, bits), to_double(g, bits), to_double(b, bits), space)

    def translate_space(self, space: ColorSpace) -> Color:
        """The same color expressed in another color space."""
        if space == self.space:
            return self
        components = (self.r, self.g, self.b)
        if self.space == ColorSpace.RGB:
            xyz = _rgb_to_xyz(*components)
        elif self.space == ColorSpace.LAB:
            xyz = _lab_to_xyz(*components)
        else:
            xyz = components
        if space == ColorSpace.RGB:
            out = _xyz_to_rgb(*xyz)
        elif space == ColorSpace.LAB:
            out = _xyz_to_lab(*xyz)
        else:
            out = xyz
        return Color(out[0], out[1], out[2], space)

    def __sub__(self, other: Color) -> Color:
        if self.space != other.space:
            raise ValueError("cannot subtract colors in different spaces")
        return Color(
            abs(self.r - other.r),
            abs(self.g - other.g),
            abs(self.b - other.b),
            self.space,
        )


def cie75_distance(left: Color, right: Color) -> float:
    """Euclidean distance between two colors in L*a*b* space."""
    diff = left.translate_space(ColorSpace.LAB) - right.translate_space(ColorSpace.LAB)
    return math.sqrt(diff.r * diff.r + diff.g * diff.g + diff.b * diff.b)