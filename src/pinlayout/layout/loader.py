"""YAML loader for pinned layout definitions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.pin import AxisPin, pin
from .pinned import Pinned

logger = logging.getLogger(__name__)


# Semantic keys and the (axis, pin field) they map onto
SEMANTIC_KEYS: dict[str, tuple[str, str]] = {
    "left": ("h", "start"),
    "left_fraction": ("h", "start_fraction"),
    "right": ("h", "end"),
    "right_fraction": ("h", "end_fraction"),
    "width": ("h", "size"),
    "horizontal_middle": ("h", "middle"),
    "top": ("v", "start"),
    "top_fraction": ("v", "start_fraction"),
    "bottom": ("v", "end"),
    "bottom_fraction": ("v", "end_fraction"),
    "height": ("v", "size"),
    "vertical_middle": ("v", "middle"),
}

PIN_EDGES = ("left", "right", "top", "bottom")
FIXED_AXES = ("width", "height")


class PinnedLoader:
    """Loads Pinned definitions from YAML files.

    YAML format supports two modes:

    1. Semantic (edge and size names):
        name: badge
        pin:
          left: 20
          width: 60
          top_fraction: 0.1
          bottom_fraction: 0.1

    2. Design export (original geometry plus flags):
        name: logo
        size: [200, 200]          # original parent [width, height]
        bounds: [20, 20, 60, 60]  # original child [left, top, width, height]
        pin: [left, top]          # edges that keep their absolute inset
        fixed: [width]            # axes that keep their original length

    A definition with neither fills its container on both axes.
    """

    def load(self, path: str | Path) -> Pinned:
        """Load a Pinned definition from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            The Pinned definition; its name defaults to the file stem
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        return self._build(data or {}, default_name=path.stem)

    def load_string(self, yaml_string: str) -> Pinned:
        """Load a Pinned definition from a YAML string."""
        data = yaml.safe_load(yaml_string)
        return self._build(data or {}, default_name="pinned")

    def load_all(self, directory: str | Path) -> dict[str, Pinned]:
        """Load every *.yaml definition in a directory, keyed by name."""
        definitions = {}
        for path in sorted(Path(directory).glob("*.yaml")):
            pinned = self.load(path)
            definitions[pinned.name] = pinned
        return definitions

    def _build(self, data: dict[str, Any], default_name: str) -> Pinned:
        if not isinstance(data, dict):
            raise ValueError(f"Definition must be a mapping, got {type(data).__name__}")

        name = data.get("name", default_name)

        if "bounds" in data:
            pinned = self._build_from_design(name, data)
        elif "size" in data or "fixed" in data:
            raise ValueError(f"Definition '{name}' has a parent size or fixed axes but no bounds")
        else:
            h_pin, v_pin = self._build_semantic(data.get("pin") or {})
            pinned = Pinned.from_pins(h_pin, v_pin, name=name)

        logger.debug("Loaded %s: h_pin=%r v_pin=%r", name, pinned.h_pin, pinned.v_pin)
        return pinned

    def _build_semantic(self, pin_data: dict[str, Any]) -> tuple[AxisPin, AxisPin]:
        if not isinstance(pin_data, dict):
            raise ValueError("Semantic 'pin' must be a mapping of edge names to values")

        fields: dict[str, dict[str, float]] = {"h": {}, "v": {}}
        for key, value in pin_data.items():
            if key not in SEMANTIC_KEYS:
                raise ValueError(f"Unknown pin key '{key}'")
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Pin key '{key}' needs a number, got {value!r}")
            axis, field_name = SEMANTIC_KEYS[key]
            fields[axis][field_name] = float(value)

        return pin(**fields["h"]), pin(**fields["v"])

    def _build_from_design(self, name: str, data: dict[str, Any]) -> Pinned:
        if "size" not in data:
            raise ValueError(f"Definition '{name}' has bounds but no parent size")

        edges = self._names(data.get("pin", []), PIN_EDGES, "pin edge")
        axes = self._names(data.get("fixed", []), FIXED_AXES, "fixed axis")

        return Pinned.from_size(
            bounds=data["bounds"],
            size=data["size"],
            pin_left="left" in edges,
            pin_right="right" in edges,
            pin_top="top" in edges,
            pin_bottom="bottom" in edges,
            fixed_width="width" in axes,
            fixed_height="height" in axes,
            name=name,
        )

    def _names(self, values: Any, allowed: tuple[str, ...], kind: str) -> set[str]:
        if values is None:
            return set()
        if isinstance(values, str):
            values = [values]
        if not isinstance(values, (list, tuple)):
            raise ValueError(f"Expected a {kind} name or list of names, got {values!r}")
        names = set()
        for value in values:
            if value not in allowed:
                raise ValueError(f"Unknown {kind} '{value}', expected one of {allowed}")
            names.add(value)
        return names
