# -*- coding: utf-8 -*-
"""
HARMONY PICKER: Color wheel & harmony palette core
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import math
from dataclasses import dataclass
from typing import Final, Optional, Tuple

from .colormodel import clamp_unit, normalize_hue

__all__ = [
    "WheelGeometry",
    "ValueGeometry",
    "PickerLayout",
    "WHEEL_WIDTH_RATIO",
    "WHEEL_PADDING_RATIO",
    "POINTER_SIZE_RATIO",
]

# Share of the view width taken by the wheel; also the view's height/width ratio.
WHEEL_WIDTH_RATIO: Final[float] = 0.8
# Gap between the wheel area and the value slider, as a share of the width.
WHEEL_PADDING_RATIO: Final[float] = 0.1
# Diameter of a wheel pointer marker relative to the wheel radius.
POINTER_SIZE_RATIO: Final[float] = 0.075
# Relative slack on the rim so points placed at saturation 1 stay inside.
RIM_TOLERANCE: Final[float] = 1e-12


@dataclass(frozen=True)
class WheelGeometry:
    """Maps points around the wheel center to (hue, saturation) and back."""
    cx: float
    cy: float
    radius: float

    def __post_init__(self):
        if not self.radius > 0:
            raise ValueError(f"Wheel radius must be positive, got {self.radius}")

    def point_to_hue_saturation(self, x: float, y: float) -> Optional[Tuple[float, float]]:
        """Converts a point to (hue, saturation).

        Returns None when the point lies outside the wheel. The rim itself
        (distance == radius, within rounding) counts as inside, and the
        exact center maps to hue 0.
        """
        dx = x - self.cx
        dy = y - self.cy
        d = math.hypot(dx, dy)
        if d > self._rim:
            return None
        if d == 0:
            return 0.0, 0.0
        hue = normalize_hue(math.degrees(math.atan2(dy, dx)) + 360.0)
        return hue, clamp_unit(d / self.radius)

    @property
    def _rim(self) -> float:
        return self.radius * (1.0 + RIM_TOLERANCE)

    def contains(self, x: float, y: float) -> bool:
        return math.hypot(x - self.cx, y - self.cy) <= self._rim

    def hue_saturation_to_point(self, hue: float, saturation: float) -> Tuple[float, float]:
        angle = math.radians(hue)
        return (self.cx + math.cos(angle) * saturation * self.radius,
                self.cy + math.sin(angle) * saturation * self.radius)


@dataclass(frozen=True)
class ValueGeometry:
    """Maps the slider's vertical axis to the value channel.

    The top edge is full brightness, the bottom edge is black. A point
    belongs to the slider when it is at or right of ``left``; the band is
    open to the right so a drag that overshoots the view keeps updating.
    ``right`` only bounds the painted rectangle.
    """
    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self):
        if not self.bottom > self.top:
            raise ValueError(f"Slider bottom ({self.bottom}) must be below top ({self.top})")
        if self.right < self.left:
            raise ValueError(f"Slider right ({self.right}) must not be left of left ({self.left})")

    def contains(self, x: float) -> bool:
        return x >= self.left

    def y_to_value(self, y: float) -> float:
        if y <= self.top:
            return 1.0
        if y >= self.bottom:
            return 0.0
        return 1.0 - (y - self.top) / (self.bottom - self.top)

    def value_to_y(self, value: float) -> float:
        return self.bottom - clamp_unit(value) * (self.bottom - self.top)


@dataclass(frozen=True)
class PickerLayout:
    """Geometry of one layout pass: the wheel, the slider and marker sizes."""
    wheel: WheelGeometry
    slider: ValueGeometry
    pointer_size: float

    @staticmethod
    def preferred_height(width: float) -> float:
        return width * WHEEL_WIDTH_RATIO

    @classmethod
    def from_view_size(cls, width: float, height: float) -> "PickerLayout":
        """Lays out the wheel on the left and the slider on the right.

        The wheel diameter equals the view height; the slider occupies the
        strip right of the wheel area and padding.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"View size must be positive, got {width}x{height}")
        radius = height / 2
        wheel = WheelGeometry(cx=radius, cy=radius, radius=radius)
        slider = ValueGeometry(left=(WHEEL_WIDTH_RATIO + WHEEL_PADDING_RATIO) * width,
                               top=0.0, right=float(width), bottom=float(height))
        return cls(wheel=wheel, slider=slider, pointer_size=POINTER_SIZE_RATIO * radius)
