from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CampaignObjective(str, Enum):
    OUTCOME_TRAFFIC = "OUTCOME_TRAFFIC"


class EntityStatus(str, Enum):
    PAUSED = "PAUSED"
    ACTIVE = "ACTIVE"


class OptimizationGoal(str, Enum):
    LINK_CLICKS = "LINK_CLICKS"


class MetaEntity(BaseModel):
    # Graph API responses carry extra fields we do not model
    model_config = ConfigDict(extra="ignore")


class MetaCampaign(MetaEntity):
    id: str
    name: Optional[str] = None
    status: Optional[str] = None


class MetaAdSet(MetaEntity):
    id: str
    name: Optional[str] = None
    status: Optional[str] = None
    campaign_id: Optional[str] = None


class MetaAdImage(MetaEntity):
    hash: str
    url: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def unwrap_images(cls, data: Any) -> Any:
        """Accept ``{"images": {"<key>": {"hash", "url"}}}`` as well as a flat body."""
        if isinstance(data, dict) and isinstance(data.get("images"), dict):
            images = list(data["images"].values())
            if images:
                return images[0]
        return data


class MetaAdCreative(MetaEntity):
    id: str
    name: Optional[str] = None


class CreativeRef(MetaEntity):
    id: str


class MetaAd(MetaEntity):
    id: str
    name: Optional[str] = None
    status: Optional[str] = None
    creative: Optional[CreativeRef] = None


class GeoLocations(BaseModel):
    countries: list[str]


class AdSetTargeting(BaseModel):
    geo_locations: GeoLocations
    age_min: int = Field(..., ge=18)
    age_max: int = Field(..., le=65)
    targeting_automation: dict[str, int] = Field(
        default_factory=lambda: {"advantage_audience": 0}
    )
