# -*- coding: utf-8 -*-
"""
HARMONY PICKER: Color wheel & harmony palette core
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import logging
import threading
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from .colormodel import ColorModel, ColorState
from .geometry import PickerLayout
from .harmonyengine import HarmonizedColor, HarmonyEngine, HarmonyType
from .persistence import PersistedState, StateRestoreError, from_persisted, to_persisted
from .render import RenderDescriptor, build_render_descriptor

__all__ = ["ColorPickerCore", "PaletteListener"]

logger = logging.getLogger(__name__)

PaletteListener = Callable[[List[int]], None]


class ColorPickerCore:
    """Color state, harmony palette and pointer handling of the picker widget.

    A platform adapter feeds layout and pointer events in and paints the
    ``render_descriptor()``; the palette is reported to a single listener
    after every update.

    Every update runs under one reentrant lock together with the listener
    call, so the color and the harmonized list are never observed out of
    step. The listener may read back from the core.
    """

    def __init__(self,
                 color: Optional[int] = None,
                 harmony_type: HarmonyType = HarmonyType.NONE,
                 layout: Optional[PickerLayout] = None,
                 touchable: bool = True):
        """Initializes the picker core.

        Args:
            color (int, optional): Initial packed 0xRRGGBB color. Defaults to white.
            harmony_type (HarmonyType): Initial harmony rule. Defaults to NONE.
            layout (PickerLayout, optional): Geometry of the current layout pass.
            touchable (bool): Whether pointer events are handled. Defaults to True.
        """
        HarmonyEngine.offsets(harmony_type)
        self._lock = threading.RLock()
        self._model = ColorModel(on_change=self._on_color_changed)
        self._harmony_type = harmony_type
        self._layout = layout
        self._touchable = touchable
        self._listener: Optional[PaletteListener] = None
        self._harmonized: Tuple[HarmonizedColor, ...] = ()
        self._descriptor: Optional[RenderDescriptor] = None

        if color is not None:
            self._model.set_from_packed(color)
        self._recompute()

    # --- Color ---

    @property
    def state(self) -> ColorState:
        return self._model.state

    def set_color(self, rgb: int) -> None:
        """Sets the current color from a packed 0xRRGGBB (alpha byte ignored)."""
        with self._lock:
            if not self._model.set_from_packed(rgb):
                # unchanged color still reports the palette
                self._refresh()

    def get_color(self) -> int:
        with self._lock:
            return self._model.to_packed()

    def set_hue(self, hue: float) -> None:
        with self._lock:
            self._model.set_hue(hue)

    def set_saturation(self, saturation: float) -> None:
        with self._lock:
            self._model.set_saturation(saturation)

    def set_value(self, value: float) -> None:
        with self._lock:
            self._model.set_value(value)

    # --- Harmony ---

    def set_harmony_type(self, harmony_type: HarmonyType) -> None:
        HarmonyEngine.offsets(harmony_type)
        with self._lock:
            logger.debug("Harmony type %s -> %s", self._harmony_type.name, harmony_type.name)
            self._harmony_type = harmony_type
            self._refresh()

    def get_harmony_type(self) -> HarmonyType:
        with self._lock:
            return self._harmony_type

    @property
    def harmonized(self) -> Tuple[HarmonizedColor, ...]:
        with self._lock:
            return self._harmonized

    def get_harmonized_colors(self) -> List[int]:
        """Returns the current palette as packed 0xRRGGBB integers."""
        with self._lock:
            return [c.to_packed() for c in self._harmonized]

    # --- Listener ---

    def on_palette_changed(self, callback: Optional[PaletteListener]) -> None:
        """Registers the palette listener, replacing any previous one. None clears it."""
        self._listener = callback

    # --- Touch ---

    def set_touchable(self, touchable: bool) -> None:
        self._touchable = bool(touchable)

    def is_touchable(self) -> bool:
        return self._touchable

    # --- Layout & rendering ---

    @property
    def layout(self) -> Optional[PickerLayout]:
        return self._layout

    def set_layout(self, layout: PickerLayout) -> None:
        with self._lock:
            self._layout = layout
            self._rebuild_descriptor()

    def render_descriptor(self) -> Optional[RenderDescriptor]:
        """The frame description for the current state, None until a layout is set."""
        return self._descriptor

    def handle_pointer_event(self, x: float, y: float) -> bool:
        """Runs a pointer down/move event through the picker.

        The wheel is tested first, then the slider band. Returns whether the
        event was consumed; it is not when touch is disabled, no layout is
        set, or the point is outside both regions.
        """
        if not self._touchable or self._layout is None:
            return False

        with self._lock:
            layout = self._layout
            hue_sat = layout.wheel.point_to_hue_saturation(x, y)
            if hue_sat is not None:
                logger.debug("Pointer (%.1f, %.1f) - wheel", x, y)
                hue, saturation = hue_sat
                self._model.set_hsv(hue, saturation, self._model.value)
                return True

            if layout.slider.contains(x):
                logger.debug("Pointer (%.1f, %.1f) - value slider", x, y)
                self._model.set_value(layout.slider.y_to_value(y))
                return True

        logger.debug("Pointer (%.1f, %.1f) - outside", x, y)
        return False

    # --- Persistence ---

    def to_persisted(self) -> PersistedState:
        with self._lock:
            return to_persisted(self._model.state, self._harmony_type)

    def restore_state(self, record: Union[PersistedState, Mapping[str, Any]]) -> bool:
        """Restores a persisted record, falling back to defaults if it is malformed.

        Returns:
            bool: True if the record was restored, False if defaults were used.
        """
        try:
            state, harmony_type = from_persisted(record)
            restored = True
        except StateRestoreError as e:
            logger.warning("Could not restore picker state, using defaults: %s", e)
            state, harmony_type = ColorState(), HarmonyType.NONE
            restored = False

        with self._lock:
            self._harmony_type = harmony_type
            if not self._model.set_hsv(*state.as_tuple()):
                self._refresh()
        return restored

    # --- Internals ---

    def _on_color_changed(self, state: ColorState) -> None:
        self._refresh()

    def _recompute(self) -> None:
        self._harmonized = HarmonyEngine.harmonize(self._model.state, self._harmony_type)
        self._rebuild_descriptor()

    def _rebuild_descriptor(self) -> None:
        if self._layout is None:
            self._descriptor = None
        else:
            self._descriptor = build_render_descriptor(self._layout, self._model.state,
                                                       self._harmonized)

    def _refresh(self) -> None:
        self._recompute()
        if self._listener is not None:
            self._listener(self.get_harmonized_colors())
