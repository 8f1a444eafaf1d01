# -*- coding: utf-8 -*-
"""
HARMONY PICKER: Color wheel & harmony palette core
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

__all__ = ["ColorState", "ColorMath", "ColorModel", "normalize_hue", "clamp_unit"]


def normalize_hue(hue: float) -> float:
    """Wraps a hue in degrees into [0, 360)."""
    h = float(hue) % 360.0
    # float modulo of a tiny negative number can round up to 360.0
    return 0.0 if h >= 360.0 else h


def clamp_unit(x: float) -> float:
    return max(0.0, min(1.0, float(x)))


@dataclass(frozen=True)
class ColorState:
    """An (hue, saturation, value) triple.

    Hue is in degrees [0, 360), saturation and value are in [0, 1]. Use
    ``ColorState.normalized`` to build one from arbitrary numbers.
    """
    hue: float = 0.0
    saturation: float = 0.0
    value: float = 1.0

    @classmethod
    def normalized(cls, hue: float, saturation: float, value: float) -> "ColorState":
        """Wraps the hue and clamps the channels.

        Raises:
            ValueError: If any channel is NaN or infinite.
        """
        for name, x in (("hue", hue), ("saturation", saturation), ("value", value)):
            if not math.isfinite(x):
                raise ValueError(f"Color {name} must be finite, got {x!r}")
        return cls(normalize_hue(hue), clamp_unit(saturation), clamp_unit(value))

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.hue, self.saturation, self.value


class ColorMath:
    """Vectorized color conversion and packed-integer utility methods."""

    @staticmethod
    def hsv_to_rgb_vectorized(h, s, v):
        """Converts HSV to RGB using NumPy vectorization.

        Args:
            h: Hue in degrees (0.0 - 360.0), scalar or numpy array.
            s: Saturation (0.0 - 1.0), scalar or numpy array.
            v: Value (0.0 - 1.0), scalar or numpy array.

        Returns:
            Tuple of (r, g, b) floats in 0-255.
        """
        h6 = (np.asarray(h, dtype=np.float64) % 360.0) / 60.0
        s = np.asarray(s, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)
        r_base = np.clip(np.abs(h6 - 3) - 1, 0, 1)
        g_base = np.clip(2 - np.abs(h6 - 2), 0, 1)
        b_base = np.clip(2 - np.abs(h6 - 4), 0, 1)
        s_inv = 1.0 - s
        red   = v * (s_inv + s * r_base) * 255
        green = v * (s_inv + s * g_base) * 255
        blue  = v * (s_inv + s * b_base) * 255
        return red, green, blue

    @staticmethod
    def rgb_to_hsv_vectorized(r, g, b):
        """Converts RGB (0-255) to HSV with hue in degrees.

        Achromatic inputs get hue 0 and black gets saturation 0.

        Returns:
            Tuple of (h, s, v) with h in [0, 360) and s, v in [0, 1].
        """
        rgb = np.stack(np.broadcast_arrays(r, g, b)).astype(np.float64) / 255.0
        r, g, b = rgb
        c_max = rgb.max(axis=0)
        c_min = rgb.min(axis=0)
        delta = c_max - c_min
        safe_delta = np.where(delta > 0, delta, 1.0)

        hue = np.where(
            c_max == r, ((g - b) / safe_delta) % 6.0,
            np.where(c_max == g, (b - r) / safe_delta + 2.0, (r - g) / safe_delta + 4.0)
        ) * 60.0
        hue = np.where(delta > 0, hue, 0.0) % 360.0
        sat = np.where(c_max > 0, delta / np.where(c_max > 0, c_max, 1.0), 0.0)
        return hue, sat, c_max

    @staticmethod
    def pack(r, g, b) -> int:
        """Packs 0-255 float channels into 0xRRGGBB, rounding each channel."""
        r, g, b = (int(np.clip(np.rint(c), 0, 255)) for c in (r, g, b))
        return (r << 16) | (g << 8) | b

    @staticmethod
    def unpack(rgb: int) -> Tuple[int, int, int]:
        rgb = int(rgb) & 0xFFFFFF
        return (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF

    @staticmethod
    def hsv_to_packed(h: float, s: float, v: float) -> int:
        return ColorMath.pack(*ColorMath.hsv_to_rgb_vectorized(h, s, v))

    @staticmethod
    def packed_to_state(rgb: int) -> ColorState:
        h, s, v = ColorMath.rgb_to_hsv_vectorized(*ColorMath.unpack(rgb))
        return ColorState.normalized(float(h), float(s), float(v))

    @staticmethod
    def grayscale(value: float) -> int:
        """Packed gray with the given brightness."""
        return ColorMath.hsv_to_packed(0.0, 0.0, clamp_unit(value))

    @staticmethod
    def to_hex(rgb: int) -> str:
        return f"#{int(rgb) & 0xFFFFFF:06X}"


class ColorModel:
    """Holds the current color and reports every change to its owner.

    The owner installs ``on_change``; it is called once per setter call that
    actually alters the triple.
    """

    def __init__(self, state: Optional[ColorState] = None,
                 on_change: Optional[Callable[[ColorState], None]] = None):
        self._state = state if state is not None else ColorState()
        self.on_change = on_change

    @property
    def state(self) -> ColorState:
        return self._state

    @property
    def hue(self) -> float:
        return self._state.hue

    @property
    def saturation(self) -> float:
        return self._state.saturation

    @property
    def value(self) -> float:
        return self._state.value

    def set_hsv(self, hue: float, saturation: float, value: float) -> bool:
        """Sets the whole triple at once. Returns True if it changed."""
        new_state = ColorState.normalized(hue, saturation, value)
        if new_state == self._state:
            return False
        self._state = new_state
        if self.on_change is not None:
            self.on_change(new_state)
        return True

    def set_hue(self, hue: float) -> bool:
        return self.set_hsv(hue, self._state.saturation, self._state.value)

    def set_saturation(self, saturation: float) -> bool:
        return self.set_hsv(self._state.hue, saturation, self._state.value)

    def set_value(self, value: float) -> bool:
        return self.set_hsv(self._state.hue, self._state.saturation, value)

    def set_from_packed(self, rgb: int) -> bool:
        s = ColorMath.packed_to_state(rgb)
        return self.set_hsv(s.hue, s.saturation, s.value)

    def to_packed(self) -> int:
        return ColorMath.hsv_to_packed(*self._state.as_tuple())
