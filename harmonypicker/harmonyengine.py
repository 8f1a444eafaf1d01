# -*- coding: utf-8 -*-
"""
HARMONY PICKER: Color wheel & harmony palette core
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

from enum import IntEnum
from typing import Dict, Final, List, NamedTuple, Tuple

from .colormodel import ColorMath, ColorState, normalize_hue

__all__ = ["HarmonyType", "HarmonizedColor", "HarmonyEngine", "harmonize"]


class HarmonyType(IntEnum):
    """Harmony rules. The integer value is the persisted ordinal."""
    NONE = 0
    COMPLEMENTARY = 1
    SPLIT_COMPLEMENTARY = 2
    ANALOGOUS = 3
    ANALOGOUS_ACCENT = 4
    TRIADIC = 5
    SQUARE = 6
    TETRADIC_PLUS = 7
    TETRADIC_MINUS = 8
    CLASH = 9
    FIVE_TONE = 10
    SIX_TONE = 11

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Split Complementary'."""
        return self.name.replace("_", " ").title()


class HarmonizedColor(NamedTuple):
    hue: float
    saturation: float
    value: float

    def to_packed(self) -> int:
        return ColorMath.hsv_to_packed(self.hue, self.saturation, self.value)


class HarmonyEngine:
    """Logic for calculating color harmony relationships."""

    # Offsets in degrees, in emission order.
    RELATIONSHIPS: Final[Dict[HarmonyType, Tuple[int, ...]]] = {
        HarmonyType.NONE:                (0,),
        HarmonyType.COMPLEMENTARY:       (0, 180),
        HarmonyType.SPLIT_COMPLEMENTARY: (0, 150, 210),
        HarmonyType.ANALOGOUS:           (0, 330, 30),   # 330 is -30 normalized
        HarmonyType.ANALOGOUS_ACCENT:    (0, 330, 30, 180),
        HarmonyType.TRIADIC:             (0, 120, 240),
        HarmonyType.SQUARE:              (0, 90, 180, 270),
        HarmonyType.TETRADIC_PLUS:       (0, 60, 180, 240),
        HarmonyType.TETRADIC_MINUS:      (0, 120, 180, 300),
        HarmonyType.CLASH:               (0, 90, 270),
        HarmonyType.FIVE_TONE:           (0, 60, 120, 240, 300),

        # The base hue itself is not part of the six-tone set.
        HarmonyType.SIX_TONE:            (30, 90, 120, 240, 270, 330),
    }

    @staticmethod
    def offsets(harmony_type: HarmonyType) -> Tuple[int, ...]:
        if not isinstance(harmony_type, HarmonyType):
            raise TypeError(f"Expected a HarmonyType, got {type(harmony_type).__name__}")
        return HarmonyEngine.RELATIONSHIPS[harmony_type]

    @staticmethod
    def get_harmonies(base_hue: float, harmony_type: HarmonyType) -> List[float]:
        """Generates a list of hue values based on the selected harmony rule.

        Args:
            base_hue: Starting hue in degrees.
            harmony_type: The harmony rule.

        Returns:
            List[float]: Hues in degrees, wrapped into [0, 360).
        """
        return [normalize_hue(base_hue + deg) for deg in HarmonyEngine.offsets(harmony_type)]

    @staticmethod
    def harmonize(base: ColorState, harmony_type: HarmonyType) -> Tuple[HarmonizedColor, ...]:
        """Derives the companion colors of ``base``.

        Saturation and value are shared with the base color; only the hue
        is rotated. The result preserves table order.
        """
        return tuple(
            HarmonizedColor(hue, base.saturation, base.value)
            for hue in HarmonyEngine.get_harmonies(base.hue, harmony_type)
        )


harmonize = HarmonyEngine.harmonize
