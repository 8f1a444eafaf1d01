# -*- coding: utf-8 -*-
"""
HARMONY PICKER: Color wheel & harmony palette core
Copyright (c) 2025 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later
"""

import math
from dataclasses import asdict, dataclass
from numbers import Integral, Real
from typing import Any, Dict, Mapping, Tuple, Union

from .colormodel import ColorState
from .harmonyengine import HarmonyType

__all__ = ["PersistedState", "StateRestoreError", "to_persisted", "from_persisted"]


class StateRestoreError(ValueError):
    """Raised when a persisted picker record cannot be restored."""


@dataclass(frozen=True)
class PersistedState:
    """Flat record a host can store across save/restore cycles."""
    hue: float
    saturation: float
    value: float
    harmony_type: int

    def as_dict(self) -> Dict[str, Union[float, int]]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PersistedState":
        """Builds a record from a mapping without validating the numbers."""
        if not isinstance(data, Mapping):
            raise StateRestoreError(f"Persisted state must be a mapping, got {type(data).__name__}")
        missing = [f for f in ("hue", "saturation", "value", "harmony_type") if f not in data]
        if missing:
            raise StateRestoreError(f"Persisted state is missing field(s): {', '.join(missing)}")
        return cls(data["hue"], data["saturation"], data["value"], data["harmony_type"])


def to_persisted(state: ColorState, harmony_type: HarmonyType) -> PersistedState:
    return PersistedState(state.hue, state.saturation, state.value, int(harmony_type))


def _real(name: str, x: Any) -> float:
    # bool is an int subclass but never a meaningful channel value
    if isinstance(x, bool) or not isinstance(x, Real):
        raise StateRestoreError(f"Field '{name}' must be a number, got {x!r}")
    x = float(x)
    if not math.isfinite(x):
        raise StateRestoreError(f"Field '{name}' must be finite, got {x!r}")
    return x


def from_persisted(record: Union[PersistedState, Mapping[str, Any]]) -> Tuple[ColorState, HarmonyType]:
    """Restores a color state and harmony type from a persisted record.

    Numbers are normalized: hue wraps into [0, 360) and saturation/value are
    clamped. Structural problems (missing fields, non-numeric values, an
    unknown harmony ordinal) raise StateRestoreError.
    """
    if not isinstance(record, PersistedState):
        record = PersistedState.from_dict(record)

    state = ColorState.normalized(
        _real("hue", record.hue),
        _real("saturation", record.saturation),
        _real("value", record.value),
    )

    ordinal = record.harmony_type
    if isinstance(ordinal, bool) or not isinstance(ordinal, Integral):
        raise StateRestoreError(f"Field 'harmony_type' must be an integer ordinal, got {ordinal!r}")
    try:
        harmony_type = HarmonyType(int(ordinal))
    except ValueError as e:
        raise StateRestoreError(f"Unknown harmony type ordinal: {ordinal}") from e
    return state, harmony_type
