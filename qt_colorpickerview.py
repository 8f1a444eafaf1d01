# -*- coding: utf-8 -*-
"""
HARMONY PICKER: Color wheel & harmony palette core
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""
import sys
import logging
import numpy as np
from typing import Any, Dict, List, Optional
from PySide6.QtWidgets import QApplication, QWidget, QVBoxLayout, QHBoxLayout, QSizePolicy, QComboBox
from PySide6.QtGui import (QPainter, QImage, QPixmap, QColor, QPen, QBrush, QLinearGradient,
                           QMouseEvent, QGuiApplication)
from PySide6.QtCore import Qt, Signal, Slot, QPointF, QRectF, QSize

from harmonypicker import ColorMath, ColorPickerCore, HarmonyType, PickerLayout, WheelGradient

__all__ = ["render_wheel_rgba", "ColorPickerView", "ColorSwatch", "ColorPickerDemo"]

logger = logging.getLogger(__name__)


def render_wheel_rgba(wheel: WheelGradient, size: int) -> np.ndarray:
    """Rasterizes the wheel appearance into a (size, size, 4) RGBA buffer.

    The hue sweep is interpolated by angle between its stops, then the
    radial overlay is blended source-over on top of it. Pixels outside the
    disc are fully transparent.
    """
    radius = size / 2

    # 1. Grid Generation (pixel centers)
    y, x = np.ogrid[0:size, 0:size]
    dx = x + 0.5 - radius
    dy = y + 0.5 - radius
    hypot = np.hypot(dx, dy)

    # 2. Sweep Layer
    angle = np.degrees(np.arctan2(dy, dx)) % 360.0
    sweep_pos = np.array([s.position for s in wheel.sweep_stops]) * 360.0
    sweep_rgb = np.array([ColorMath.unpack(s.color) for s in wheel.sweep_stops], dtype=np.float64)
    sweep = np.stack([np.interp(angle, sweep_pos, sweep_rgb[:, i]) for i in range(3)], axis=-1)

    # 3. Radial Overlay (source-over)
    t = np.clip(hypot / radius, 0.0, 1.0)
    radial_pos = [s.position for s in wheel.radial_stops]
    radial_rgb = np.array([ColorMath.unpack(s.color) for s in wheel.radial_stops], dtype=np.float64)
    overlay = np.stack([np.interp(t, radial_pos, radial_rgb[:, i]) for i in range(3)], axis=-1)
    alpha = np.interp(t, radial_pos, [s.alpha for s in wheel.radial_stops])[..., np.newaxis]
    blended = overlay * alpha + sweep * (1.0 - alpha)

    # 4. Buffer Packing
    rgba = np.empty((size, size, 4), dtype=np.uint8)
    rgba[..., :3] = np.clip(np.rint(blended), 0, 255)
    rgba[..., 3] = (hypot <= radius) * 255
    return rgba


def _qcolor(rgb: int, alpha: float = 1.0) -> QColor:
    r, g, b = ColorMath.unpack(rgb)
    c = QColor(r, g, b)
    c.setAlphaF(alpha)
    return c


class ColorPickerView(QWidget):
    """A hue/saturation wheel with a value slider on its right.

    All color logic lives in ``self.core``; this widget only lays it out,
    forwards mouse input and paints the core's render descriptor.
    """
    paletteChanged = Signal(list)  # packed 0xRRGGBB ints

    def __init__(self,
                 seed_color: Optional[str] = None,
                 harmony_type: HarmonyType = HarmonyType.NONE,
                 touchable: bool = True,
                 parent: Optional[QWidget] = None):
        """Initializes the ColorPickerView.

        Args:
            seed_color (str, optional): Hex code or name to initialize the color state.
            harmony_type (HarmonyType): The initial harmony rule. Defaults to NONE.
            touchable (bool): Whether the mouse selects colors. Defaults to True.
            parent (QWidget, optional): Parent widget.
        """
        super().__init__(parent)
        color = None
        if seed_color:
            c = QColor(seed_color)
            if c.isValid():
                color = c.rgb() & 0xFFFFFF
            else:
                logger.warning("Ignoring invalid seed color %r", seed_color)

        self.core = ColorPickerCore(color=color, harmony_type=harmony_type, touchable=touchable)
        self.core.on_palette_changed(self._on_palette)
        self._pixmap: Optional[QPixmap] = None

        policy = QSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        policy.setHeightForWidth(True)
        self.setSizePolicy(policy)
        self.setMinimumSize(200, 160)

    def sizeHint(self) -> QSize:
        return QSize(500, self.heightForWidth(500))

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return int(PickerLayout.preferred_height(width))

    def apply_view_size(self, width: int, height: int):
        """Recomputes the layout for a new widget size and regenerates the wheel texture."""
        if width <= 0 or height <= 0:
            return
        self.core.set_layout(PickerLayout.from_view_size(width, height))
        self._update_render()

    def resizeEvent(self, e):
        """Handles resize events to update the layout and texture."""
        self.apply_view_size(e.size().width(), e.size().height())
        super().resizeEvent(e)

    def _update_render(self):
        """Rasterizes the wheel texture; it only depends on the wheel size."""
        descriptor = self.core.render_descriptor()
        if descriptor is None:
            return
        size = max(1, int(round(2 * descriptor.wheel.radius)))
        rgba = render_wheel_rgba(descriptor.wheel, size)
        img = QImage(rgba.data, size, size, 4 * size, QImage.Format.Format_RGBA8888)
        self._pixmap = QPixmap.fromImage(img.copy())
        self.update()

    def save_state(self) -> Dict[str, Any]:
        return self.core.to_persisted().as_dict()

    def restore_state(self, record: Dict[str, Any]) -> bool:
        return self.core.restore_state(record)

    @Slot(list)
    def _on_palette(self, colors: List[int]):
        self.update()
        self.paletteChanged.emit(colors)

    def _forward_pointer(self, pos: QPointF) -> bool:
        return self.core.handle_pointer_event(pos.x(), pos.y())

    def mousePressEvent(self, e: QMouseEvent):
        """Selects a color under the cursor; events outside wheel and slider propagate."""
        if e.button() == Qt.MouseButton.LeftButton and self._forward_pointer(e.position()):
            e.accept()
        else:
            e.ignore()

    def mouseMoveEvent(self, e: QMouseEvent):
        """Updates the color while dragging."""
        if e.buttons() & Qt.MouseButton.LeftButton and self._forward_pointer(e.position()):
            e.accept()
        else:
            e.ignore()

    def paintEvent(self, e):
        """Paints the wheel texture, the value slider and the pointers."""
        descriptor = self.core.render_descriptor()
        if descriptor is None or self._pixmap is None:
            return
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

        # 1. Wheel
        wheel = descriptor.wheel
        cx, cy = wheel.center
        rad = wheel.radius
        p.drawPixmap(QRectF(cx - rad, cy - rad, 2 * rad, 2 * rad), self._pixmap,
                     QRectF(self._pixmap.rect()))

        # 2. Value Slider
        slider = descriptor.slider
        gradient = QLinearGradient(QPointF(*slider.start), QPointF(*slider.end))
        for stop in slider.stops:
            gradient.setColorAt(stop.position, _qcolor(stop.color, stop.alpha))
        left, top, right, bottom = slider.rect
        p.fillRect(QRectF(left, top, right - left, bottom - top), QBrush(gradient))

        # 3. Pointers
        p.setBrush(Qt.BrushStyle.NoBrush)
        for ptr in descriptor.wheel_pointers:
            p.setPen(QPen(_qcolor(ptr.color, ptr.alpha), ptr.stroke_width))
            p.drawEllipse(QPointF(*ptr.center), ptr.diameter / 2, ptr.diameter / 2)

        vp = descriptor.value_pointer
        p.setPen(QPen(_qcolor(vp.color), vp.stroke_width))
        p.drawLine(QPointF(*vp.start), QPointF(*vp.end))
        p.end()


class ColorSwatch(QWidget):
    """A rounded color swatch; double click copies its hex code to the clipboard."""

    def __init__(self, rgb: int, size: int = 75, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.rgb = rgb
        self.hex_str = ColorMath.to_hex(rgb)
        self.setFixedSize(size, size)
        self.setToolTip(f"{self.hex_str} (double-click to copy)")

    def mouseDoubleClickEvent(self, event):
        QGuiApplication.clipboard().setText(self.hex_str)
        logger.info("Copied to clipboard: %s", self.hex_str)

    def paintEvent(self, event):
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.setBrush(QBrush(_qcolor(self.rgb)))
        p.setPen(Qt.PenStyle.NoPen)
        p.drawRoundedRect(self.rect(), 4, 4)


class ColorPickerDemo(QWidget):
    """Harmony selector, color picker and the resulting palette as swatches."""

    COMBO_STYLE = """
        QComboBox {
            padding: 8px 15px;
            background: #333;
            color: white;
            border-radius: 8px;
            border: 1px solid #444;
            selection-background-color: #3daee9;
        }
    """

    def __init__(self,
                 seed_color: Optional[str] = None,
                 harmony_type: HarmonyType = HarmonyType.NONE,
                 allowed_types: Optional[List[HarmonyType]] = None,
                 excluded_types: Optional[List[HarmonyType]] = None,
                 parent: Optional[QWidget] = None):
        """Initializes the demo window.

        Args:
            seed_color (str, optional): Hex code or name of the initial color.
            harmony_type (HarmonyType): The initially selected harmony rule.
            allowed_types (List[HarmonyType], optional): If provided, only these rules appear.
            excluded_types (List[HarmonyType], optional): If provided, these rules are hidden.
        """
        super().__init__(parent)
        self.setWindowTitle("Color Harmonies")

        types = list(HarmonyType)
        if allowed_types:
            types = [t for t in types if t in allowed_types]
        if excluded_types:
            types = [t for t in types if t not in excluded_types]

        layout = QVBoxLayout(self)
        layout.setSpacing(10)
        layout.setContentsMargins(12, 12, 12, 12)

        self.combo = QComboBox()
        self.combo.setStyleSheet(self.COMBO_STYLE)
        for t in types:
            self.combo.addItem(t.label, t)

        # Fall back to the first listed rule if the requested one is filtered out
        if harmony_type not in types:
            harmony_type = types[0] if types else HarmonyType.NONE
        self.picker = ColorPickerView(seed_color=seed_color, harmony_type=harmony_type)

        self.swatches_layout = QHBoxLayout()
        self.swatches_layout.setSpacing(8)

        layout.addWidget(self.combo)
        layout.addWidget(self.picker, 1)
        layout.addLayout(self.swatches_layout)

        self.picker.paletteChanged.connect(self._show_palette)
        if harmony_type in types:
            self.combo.setCurrentIndex(types.index(harmony_type))
        self.combo.currentIndexChanged.connect(self._on_type_selected)

        self._show_palette(self.picker.core.get_harmonized_colors())

    @Slot(int)
    def _on_type_selected(self, index: int):
        harmony_type = self.combo.itemData(index)
        if harmony_type is not None:
            self.picker.core.set_harmony_type(HarmonyType(harmony_type))

    @Slot(list)
    def _show_palette(self, colors: List[int]):
        """Rebuilds the swatch row."""
        while self.swatches_layout.count():
            w = self.swatches_layout.takeAt(0).widget()
            if w: w.deleteLater()
        for rgb in colors:
            self.swatches_layout.addWidget(ColorSwatch(rgb))
        self.swatches_layout.addStretch()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    app = QApplication.instance() or QApplication(sys.argv)
    demo = ColorPickerDemo(seed_color="#3daee9", harmony_type=HarmonyType.TRIADIC)
    demo.resize(520, 560)
    demo.show()
    sys.exit(app.exec())
