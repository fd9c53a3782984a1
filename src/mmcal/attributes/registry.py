"""
mmcal.attributes.registry
-------------------------
Optional per-day attributes computed on request by day_info(attributes=...).
Each attribute function takes a DayInfo and returns the keys it adds.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.types import DayInfo

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_ATTRIBUTES: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _ATTRIBUTES[name] = fn

def list_attributes() -> List[str]:
    return sorted(_ATTRIBUTES)

def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    unknown = [n for n in names if n not in _ATTRIBUTES]
    if unknown:
        raise KeyError(f"Unknown attribute(s) {unknown}. Available: {list_attributes()}")
    out: Dict[str, Any] = {}
    for name in names:
        out.update(_ATTRIBUTES[name](info))
    return out
