"""Tests for persisted picker state."""

import math

import numpy as np
import pytest

from harmonypicker.colormodel import ColorState
from harmonypicker.harmonyengine import HarmonyType
from harmonypicker.persistence import (
    PersistedState,
    StateRestoreError,
    from_persisted,
    to_persisted,
)


def test_roundtrip():
    record = to_persisted(ColorState(210.0, 0.4, 0.8), HarmonyType.TETRADIC_MINUS)
    assert record == PersistedState(210.0, 0.4, 0.8, 8)
    assert from_persisted(record) == (ColorState(210.0, 0.4, 0.8), HarmonyType.TETRADIC_MINUS)


def test_dict_roundtrip():
    record = to_persisted(ColorState(5.0, 1.0, 0.5), HarmonyType.CLASH)
    data = record.as_dict()
    assert data == {"hue": 5.0, "saturation": 1.0, "value": 0.5, "harmony_type": 9}
    assert from_persisted(data) == (ColorState(5.0, 1.0, 0.5), HarmonyType.CLASH)


def test_out_of_range_hue_is_normalized():
    state, _ = from_persisted({"hue": 400, "saturation": 0.5, "value": 1.0, "harmony_type": 0})
    assert state.hue == pytest.approx(40.0)


def test_out_of_range_channels_are_clamped():
    state, _ = from_persisted({"hue": -90.0, "saturation": 1.7, "value": -0.2, "harmony_type": 0})
    assert state == ColorState(270.0, 1.0, 0.0)


def test_numpy_numbers_accepted():
    state, harmony_type = from_persisted(
        {"hue": np.float32(30.0), "saturation": 0.5, "value": 0.5, "harmony_type": np.int64(5)})
    assert state.hue == pytest.approx(30.0)
    assert harmony_type is HarmonyType.TRIADIC


class TestMalformed:
    """Structural problems raise StateRestoreError."""

    def test_missing_field(self):
        with pytest.raises(StateRestoreError, match="harmony_type"):
            from_persisted({"hue": 1.0, "saturation": 0.5, "value": 1.0})

    def test_not_a_mapping(self):
        with pytest.raises(StateRestoreError):
            from_persisted([0.0, 0.0, 1.0, 0])

    @pytest.mark.parametrize("bad", ["12", None, True, math.nan, math.inf])
    def test_bad_number(self, bad):
        with pytest.raises(StateRestoreError):
            from_persisted({"hue": bad, "saturation": 0.5, "value": 1.0, "harmony_type": 0})

    @pytest.mark.parametrize("ordinal", [12, -1, 2.0, "TRIADIC", False])
    def test_bad_ordinal(self, ordinal):
        with pytest.raises(StateRestoreError):
            from_persisted({"hue": 0.0, "saturation": 0.5, "value": 1.0, "harmony_type": ordinal})

    def test_is_value_error(self):
        assert issubclass(StateRestoreError, ValueError)
