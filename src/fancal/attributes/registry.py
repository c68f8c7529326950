from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Dict, Sequence

from ..core.types import DayInfo

if TYPE_CHECKING:
    from ..engines.calendar import CalendarEngine

AttrFunc = Callable[["CalendarEngine", DayInfo], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def list_attributes() -> list:
    return sorted(_REGISTRY)

def compute_attributes(engine: "CalendarEngine", info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](engine, info))
    return out
