"""Raw engine settings read from the environment."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class EnvConfig(BaseModel):
    """Environment values before validation; any of them may be missing."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    organization_name: str | None = None
    default_quality: int | None = None
    default_format: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
