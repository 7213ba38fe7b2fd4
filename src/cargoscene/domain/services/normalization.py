"""Normalization of loosely-typed layout input.

Upstream packing results arrive in several shapes: positions as
``[x, y, z]`` lists, as ``{"x": .., "y": .., "z": ..}`` objects, or as
objects keyed ``0``/``1``/``2``; dimensions nested under ``dimensions`` or
flat on the item; numbers as strings. Every reader in this module works by
capability (does the value have keys, indices or attributes) and never
raises. Invalid values are replaced with safe defaults:

- positions: 0 per component
- item dimensions: a small positive epsilon (no zero-volume boxes)
- container dimensions: 2 x 1.5 x 1.5 meters
- quantities: 1

``_try_number`` is the single place a value is judged numeric; it returns
None for the rejected case and every caller maps that to a default, so the
permissive policy stays visible in code.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from typing import Any

from ..value_objects import ContainerSpec, ItemSpec, Point3, Size3

__all__ = [
    "coerce_number",
    "has_position",
    "parse_container",
    "parse_dimensions",
    "parse_item",
    "parse_position",
    "parse_quantity",
    "substituted_container_fields",
    "substituted_dimension_fields",
]

DEFAULT_ITEM_DIMENSION = 0.001

_CONTAINER_DEFAULTS: dict[str, float] = {
    "length": ContainerSpec.DEFAULT_LENGTH,
    "width": ContainerSpec.DEFAULT_WIDTH,
    "height": ContainerSpec.DEFAULT_HEIGHT,
}


def _try_number(value: Any) -> float | None:
    """Interpret ``value`` as a finite float, or return None.

    Real numbers and numeric strings are accepted. Booleans, NaN,
    infinities, integers beyond float range and every other type are
    rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        source = value
    elif isinstance(value, str):
        source = value.strip()
    else:
        return None
    try:
        result = float(source)
    except (OverflowError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def coerce_number(value: Any, default: float = 0.0) -> float:
    """Return ``value`` as a float, or ``default`` when it is not numeric."""
    result = _try_number(value)
    return default if result is None else result


def _is_indexable(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return hasattr(value, "__len__") and hasattr(value, "__getitem__")


def _read_key(raw: Any, name: str) -> Any:
    """Read a named field from a mapping or an attribute from an object."""
    if raw is None:
        return None
    if isinstance(raw, Mapping):
        return raw.get(name)
    if _is_indexable(raw):
        return None
    return getattr(raw, name, None)


def _read_index(raw: Any, index: int) -> Any:
    """Read an indexed field from a sequence or an integer-keyed mapping."""
    if isinstance(raw, Mapping):
        value = raw.get(index)
        if value is None:
            value = raw.get(str(index))
        return value
    if _is_indexable(raw):
        try:
            return raw[index] if index < len(raw) else None
        except (IndexError, KeyError, TypeError):
            return None
    return None


def _read_component(raw: Any, name: str, index: int) -> Any:
    """Named field first, indexed field second."""
    value = _read_key(raw, name)
    if value is None:
        value = _read_index(raw, index)
    return value


def parse_position(raw: Any) -> Point3:
    """Parse a position into a Point3 in real units.

    Accepts None, a sequence of three (or more) values, a sequence shorter
    than three, a mapping with ``x``/``y``/``z`` or ``0``/``1``/``2`` keys, or
    any object exposing ``x``/``y``/``z`` attributes. Missing or non-numeric
    components become 0; any other shape yields the origin.

    Examples:
        >>> parse_position([1, "2", None])
        Point3(x=1.0, y=2.0, z=0.0)
        >>> parse_position({"x": 0.5, "1": 3})
        Point3(x=0.5, y=3.0, z=0.0)
        >>> parse_position("1,2,3")
        Point3(x=0.0, y=0.0, z=0.0)
    """
    if raw is None or isinstance(raw, (str, bytes, bytearray, bool, numbers.Number)):
        return Point3(0.0, 0.0, 0.0)
    if _is_indexable(raw) and len(raw) >= 3:
        return Point3(
            coerce_number(_read_index(raw, 0)),
            coerce_number(_read_index(raw, 1)),
            coerce_number(_read_index(raw, 2)),
        )
    return Point3(
        coerce_number(_read_component(raw, "x", 0)),
        coerce_number(_read_component(raw, "y", 1)),
        coerce_number(_read_component(raw, "z", 2)),
    )


def has_position(raw: Any) -> bool:
    """True when an item carries a pre-computed position."""
    if isinstance(raw, ItemSpec):
        return raw.has_position
    return _read_key(raw, "position") is not None


def _positive_or(value: Any, default: float) -> float:
    result = _try_number(value)
    if result is None or result <= 0:
        return default
    return result


def parse_dimensions(raw: Any, default: float = DEFAULT_ITEM_DIMENSION) -> Size3:
    """Parse item dimensions into a Size3 with strictly positive extents.

    Reads a nested ``dimensions`` entry when present, otherwise the
    ``length``/``width``/``height`` fields of ``raw`` itself. Sequences are
    read as ``[length, width, height]``.
    """
    if isinstance(raw, Size3):
        source: Any = raw
    else:
        source = _read_key(raw, "dimensions")
        if source is None:
            source = raw
    return Size3(
        _positive_or(_read_component(source, "length", 0), default),
        _positive_or(_read_component(source, "width", 1), default),
        _positive_or(_read_component(source, "height", 2), default),
    )


def substituted_dimension_fields(raw: Any) -> tuple[str, ...]:
    """Names of the item dimensions ``parse_dimensions`` would default."""
    if isinstance(raw, (Size3, ItemSpec)):
        return ()
    source = _read_key(raw, "dimensions")
    if source is None:
        source = raw
    substituted = []
    for i, name in enumerate(("length", "width", "height")):
        value = _try_number(_read_component(source, name, i))
        if value is None or value <= 0:
            substituted.append(name)
    return tuple(substituted)


def parse_container(raw: Any) -> ContainerSpec:
    """Parse container dimensions, substituting defaults for invalid values.

    A value that is missing, non-numeric or not positive is replaced by the
    matching ContainerSpec default (length 2, width 1.5, height 1.5).
    """
    values = {
        name: _positive_or(_read_component(raw, name, i), default)
        for i, (name, default) in enumerate(_CONTAINER_DEFAULTS.items())
    }
    return ContainerSpec(**values)


def substituted_container_fields(raw: Any) -> tuple[str, ...]:
    """Names of the container fields ``parse_container`` would default."""
    substituted = []
    for i, name in enumerate(_CONTAINER_DEFAULTS):
        value = _try_number(_read_component(raw, name, i))
        if value is None or value <= 0:
            substituted.append(name)
    return tuple(substituted)


def parse_quantity(raw: Any) -> int:
    """Parse an instance count: ``max(1, floor(q))``, 1 when missing or zero."""
    value = _try_number(raw)
    if not value:
        return 1
    return max(1, math.floor(value))


def parse_item(
    raw: Any,
    index: int = 0,
    default_dimension: float = DEFAULT_ITEM_DIMENSION,
) -> ItemSpec:
    """Parse one raw item into an ItemSpec.

    Args:
        raw: Mapping, object or ItemSpec describing the item.
        index: Position of the item in its input list, used for the
            fallback name.
        default_dimension: Extent substituted for invalid dimensions.

    Returns:
        ItemSpec whose position is None when ``raw`` carries none.
    """
    if isinstance(raw, ItemSpec):
        return raw
    name = _read_key(raw, "name")
    position = _read_key(raw, "position")
    return ItemSpec(
        name=str(name) if name is not None else f"item-{index + 1}",
        dimensions=parse_dimensions(raw, default_dimension),
        position=parse_position(position) if position is not None else None,
        quantity=parse_quantity(_read_key(raw, "quantity")),
    )
