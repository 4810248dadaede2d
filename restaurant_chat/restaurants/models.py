from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RestaurantOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: str
    price: float = Field(..., ge=0.0, description="Typical spend per person in USD")
    rating: float = Field(..., ge=0.0, le=5.0)
    distance_miles: float = Field(..., ge=0.0)
    reviews: list[str] = Field(default_factory=list)
