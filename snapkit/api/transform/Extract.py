"""Region extraction parameters."""

from pydantic import BaseModel, ConfigDict, Field


class Extract(BaseModel):
    """Crop region expressed as percentages (0-100) of the source image."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(..., ge=0, le=100, description="Left edge as percentage")
    y: float = Field(..., ge=0, le=100, description="Top edge as percentage")
    width: float = Field(..., ge=0, le=100, description="Region width as percentage")
    height: float = Field(..., ge=0, le=100, description="Region height as percentage")
