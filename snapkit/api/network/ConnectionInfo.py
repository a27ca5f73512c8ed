"""Externally supplied connection hints."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

EffectiveType = Literal["slow-2g", "2g", "3g", "4g"]
EFFECTIVE_TYPES: tuple[str, ...] = ("slow-2g", "2g", "3g", "4g")


@dataclass(frozen=True)
class ConnectionInfo:
    """Network quality hints provided by the host (never measured here)."""

    effective_type: str | None = None
    save_data: bool = False
    online: bool = True

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "ConnectionInfo":
        """Build hints from ECT and Save-Data client-hint request headers."""
        lowered = {key.lower(): value for key, value in headers.items()}
        effective_type = (lowered.get("ect") or "").strip().lower() or None
        if effective_type not in EFFECTIVE_TYPES:
            effective_type = None
        save_data = (lowered.get("save-data") or "").strip().lower() == "on"
        return cls(effective_type=effective_type, save_data=save_data)
