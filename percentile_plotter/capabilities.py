"""
Capability manifest and user configuration for the Percentile Chart Plotter.

Declares, as static data, which data roles the chart binds and which
properties the user can configure.  ``UserSettings`` is the typed view
of the host's property bag; every field is optional and resolved to a
default by the view-model assembler.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from matplotlib.colors import is_color_like


@dataclass(frozen=True)
class DataRole:
    """A data field the chart expects from the host."""
    name: str
    kind: str          # "grouping" or "measure"
    display_name: str
    min_count: int
    max_count: int


@dataclass(frozen=True)
class PropertySpec:
    """One configurable property, addressed as ``object.property``."""
    object_name: str
    property_name: str
    kind: str          # "formatString", "fill" or "numeric"
    display_name: str


DATA_ROLES = (
    DataRole("Category", "grouping", "Category", min_count=1, max_count=1),
    DataRole("Values", "measure", "Values", min_count=0, max_count=1),
)

FORMAT_STRING = PropertySpec("general", "formatString", "formatString", "Format")
FILL = PropertySpec("dataPoint", "fill", "fill", "Fill")
LABEL_PRECISION = PropertySpec("labels", "labelPrecision", "numeric", "Decimal Places")

OBJECTS = {
    "general": (FORMAT_STRING,),
    "dataPoint": (FILL,),
    "labels": (LABEL_PRECISION,),
}


def _lookup(objects: Optional[Mapping], spec: PropertySpec) -> Any:
    if not objects:
        return None
    obj = objects.get(spec.object_name)
    if not isinstance(obj, Mapping):
        return None
    return obj.get(spec.property_name)


def _fill_color(raw: Any) -> Optional[str]:
    """Accept ``"#hex"`` or the host shape ``{"solid": {"color": "#hex"}}``.

    Anything matplotlib cannot draw with counts as absent.
    """
    if isinstance(raw, Mapping):
        solid = raw.get("solid")
        raw = solid.get("color") if isinstance(solid, Mapping) else None
    if isinstance(raw, str) and raw and is_color_like(raw):
        return raw
    return None


def _number(raw: Any) -> Optional[float]:
    if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
        return None
    if not math.isfinite(raw):
        return None
    return raw


@dataclass(frozen=True)
class UserSettings:
    """User overrides; ``None`` means "use the default".

    Parameters
    ----------
    fill_color : str or None
        ``dataPoint.fill`` — line colour.
    label_precision : number or None
        ``labels.labelPrecision`` — decimals on value labels (may be
        negative or fractional here; the assembler clamps it).
    format_string : str or None
        ``general.formatString`` — overrides the column format string.
    """
    fill_color: Optional[str] = None
    label_precision: Optional[float] = None
    format_string: Optional[str] = None

    @classmethod
    def from_objects(cls, objects: Optional[Mapping]) -> "UserSettings":
        """Read the known properties out of a host property bag.

        Unknown objects and properties are ignored; malformed values
        are treated as absent.
        """
        fmt = _lookup(objects, FORMAT_STRING)
        return cls(
            fill_color=_fill_color(_lookup(objects, FILL)),
            label_precision=_number(_lookup(objects, LABEL_PRECISION)),
            format_string=fmt if isinstance(fmt, str) and fmt else None,
        )

    @classmethod
    def from_config(cls, config: Mapping) -> "UserSettings":
        """Build from the flat dict produced by ``ConfigPanel.get_config()``."""
        return cls(
            fill_color=_fill_color(config.get('fill_color')),
            label_precision=_number(config.get('label_precision')),
            format_string=config.get('format_string') or None,
        )


def enumerate_object_instances(model, object_name: str) -> List[Dict[str, Any]]:
    """Current values of a configurable object for the property pane.

    Returns an empty list when there is no model, the model is
    degraded, or *object_name* is not configurable per instance.
    """
    if model is None or model.settings is None:
        return []

    settings = model.settings
    if object_name == FILL.object_name:
        properties = {FILL.property_name: settings.fill_color}
    elif object_name == LABEL_PRECISION.object_name:
        properties = {LABEL_PRECISION.property_name: settings.precision}
    else:
        return []

    return [{
        'objectName': object_name,
        'displayName': object_name,
        'selector': None,
        'properties': properties,
    }]
