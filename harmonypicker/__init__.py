# -*- coding: utf-8 -*-
"""
HARMONY PICKER: Color wheel & harmony palette core
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

from .colormodel import ColorMath, ColorModel, ColorState, clamp_unit, normalize_hue
from .geometry import PickerLayout, ValueGeometry, WheelGeometry
from .harmonyengine import HarmonizedColor, HarmonyEngine, HarmonyType, harmonize
from .persistence import PersistedState, StateRestoreError, from_persisted, to_persisted
from .picker import ColorPickerCore
from .render import (
    GradientStop,
    RenderDescriptor,
    SliderGradient,
    ValuePointer,
    WheelGradient,
    WheelPointer,
    build_render_descriptor,
)

__all__ = [
    "ColorMath",
    "ColorModel",
    "ColorState",
    "clamp_unit",
    "normalize_hue",
    "PickerLayout",
    "ValueGeometry",
    "WheelGeometry",
    "HarmonizedColor",
    "HarmonyEngine",
    "HarmonyType",
    "harmonize",
    "PersistedState",
    "StateRestoreError",
    "from_persisted",
    "to_persisted",
    "ColorPickerCore",
    "GradientStop",
    "RenderDescriptor",
    "SliderGradient",
    "ValuePointer",
    "WheelGradient",
    "WheelPointer",
    "build_render_descriptor",
]
