"""Render-ready view models."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ActionButton:
    label: str
    variant: str
    icon: Optional[str] = None


@dataclass(frozen=True)
class AlertView:
    id: str
    kind: Optional[str]
    variant: str
    message: str
    dismissible: bool
    position: str
    icon: Optional[str] = None
    details: Optional[str] = None
    action: Optional[ActionButton] = None
    recurring: bool = False
    retry_label: Optional[str] = None
    countdown_seconds: Optional[int] = None
    countdown_label: Optional[str] = None
    play_sound: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
