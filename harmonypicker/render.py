# -*- coding: utf-8 -*-
"""
HARMONY PICKER: Color wheel & harmony palette core
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import numpy as np
from dataclasses import dataclass
from typing import Final, Sequence, Tuple

from .colormodel import ColorMath, ColorState
from .geometry import PickerLayout
from .harmonyengine import HarmonizedColor

__all__ = [
    "GradientStop",
    "WheelGradient",
    "SliderGradient",
    "WheelPointer",
    "ValuePointer",
    "RenderDescriptor",
    "build_render_descriptor",
    "SWEEP_STEPS",
]

SWEEP_STEPS: Final[int] = 12
WHITE: Final[int] = 0xFFFFFF
BLACK: Final[int] = 0x000000

WHEEL_POINTER_COLOR: Final[int] = BLACK
WHEEL_POINTER_ALPHA: Final[float] = 128 / 255
WHEEL_POINTER_WIDTH: Final[float] = 2.0
VALUE_POINTER_WIDTH: Final[float] = 6.0


@dataclass(frozen=True)
class GradientStop:
    position: float
    color: int
    alpha: float = 1.0


@dataclass(frozen=True)
class WheelGradient:
    """Wheel appearance: a hue sweep with a white radial overlay on top.

    The overlay fades from opaque white at the center to transparent at
    the rim and is blended source-over. This only approximates the HSV
    saturation axis; it is not a per-pixel conversion.
    """
    center: Tuple[float, float]
    radius: float
    sweep_stops: Tuple[GradientStop, ...]
    radial_stops: Tuple[GradientStop, ...]
    blend_mode: str = "source-over"


@dataclass(frozen=True)
class SliderGradient:
    """Linear gradient from ``start`` (black) to ``end`` (current hue at full value)."""
    rect: Tuple[float, float, float, float]  # left, top, right, bottom
    start: Tuple[float, float]
    end: Tuple[float, float]
    stops: Tuple[GradientStop, ...]


@dataclass(frozen=True)
class WheelPointer:
    center: Tuple[float, float]
    diameter: float
    color: int = WHEEL_POINTER_COLOR
    alpha: float = WHEEL_POINTER_ALPHA
    stroke_width: float = WHEEL_POINTER_WIDTH


@dataclass(frozen=True)
class ValuePointer:
    start: Tuple[float, float]
    end: Tuple[float, float]
    color: int
    stroke_width: float = VALUE_POINTER_WIDTH


@dataclass(frozen=True)
class RenderDescriptor:
    wheel: WheelGradient
    slider: SliderGradient
    wheel_pointers: Tuple[WheelPointer, ...]
    value_pointer: ValuePointer


def _sweep_stops() -> Tuple[GradientStop, ...]:
    hues = np.arange(SWEEP_STEPS + 1) * (360.0 / SWEEP_STEPS)
    r, g, b = ColorMath.hsv_to_rgb_vectorized(hues, 1.0, 1.0)
    colors = [ColorMath.pack(*c) for c in zip(r, g, b)]
    # close the loop exactly
    colors[-1] = colors[0]
    return tuple(GradientStop(i / SWEEP_STEPS, c) for i, c in enumerate(colors))


_SWEEP_STOPS: Final[Tuple[GradientStop, ...]] = _sweep_stops()
_RADIAL_STOPS: Final[Tuple[GradientStop, ...]] = (
    GradientStop(0.0, WHITE, 1.0),
    GradientStop(1.0, WHITE, 0.0),
)


def build_render_descriptor(layout: PickerLayout, state: ColorState,
                            harmonized: Sequence[HarmonizedColor]) -> RenderDescriptor:
    """Describes one frame of the picker for an external drawing surface."""
    wheel_geo, slider_geo = layout.wheel, layout.slider

    wheel = WheelGradient(
        center=(wheel_geo.cx, wheel_geo.cy),
        radius=wheel_geo.radius,
        sweep_stops=_SWEEP_STOPS,
        radial_stops=_RADIAL_STOPS,
    )

    slider = SliderGradient(
        rect=(slider_geo.left, slider_geo.top, slider_geo.right, slider_geo.bottom),
        start=(slider_geo.right, slider_geo.bottom),
        end=(slider_geo.right, slider_geo.top),
        stops=(GradientStop(0.0, BLACK),
               GradientStop(1.0, ColorMath.hsv_to_packed(state.hue, state.saturation, 1.0))),
    )

    pointers = tuple(
        WheelPointer(center=wheel_geo.hue_saturation_to_point(c.hue, c.saturation),
                     diameter=layout.pointer_size)
        for c in harmonized
    )

    y = slider_geo.value_to_y(state.value)
    value_pointer = ValuePointer(
        start=(slider_geo.left, y),
        end=(slider_geo.right, y),
        color=ColorMath.grayscale(1.0 - state.value),
    )
    return RenderDescriptor(wheel, slider, pointers, value_pointer)
