from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LaunchStage(str, Enum):
    VALIDATING = "VALIDATING"
    CREATING_CAMPAIGN = "CREATING_CAMPAIGN"
    CREATING_ADSET = "CREATING_ADSET"
    UPLOADING_IMAGE = "UPLOADING_IMAGE"
    CREATING_CREATIVE = "CREATING_CREATIVE"
    CREATING_AD = "CREATING_AD"
    DONE = "DONE"
    FAILED = "FAILED"


class LaunchCampaignRequest(BaseModel):
    # missing fields are reported by CampaignLaunchService.validate (400)
    model_config = ConfigDict(populate_by_name=True)

    campaign_name: Optional[str] = Field(default=None, alias="campaignName")
    message: Optional[str] = None
    link: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class LaunchProgress(BaseModel):
    """Ids created so far in a launch run."""

    campaign_id: Optional[str] = None
    adset_id: Optional[str] = None
    image_hash: Optional[str] = None
    creative_id: Optional[str] = None
    ad_id: Optional[str] = None


class LaunchResult(BaseModel):
    success: bool
    stage: LaunchStage
    progress: LaunchProgress = Field(default_factory=LaunchProgress)
    failed_stage: Optional[LaunchStage] = None
    error: Optional[str] = None
    fbtrace_id: Optional[str] = None

    @property
    def is_validation_failure(self) -> bool:
        return self.failed_stage == LaunchStage.VALIDATING

    def to_response(self) -> "LaunchCampaignResponse":
        if self.success:
            return LaunchCampaignResponse(
                success=True,
                campaignId=self.progress.campaign_id,
                adsetId=self.progress.adset_id,
                creativeId=self.progress.creative_id,
                adId=self.progress.ad_id,
            )
        return LaunchCampaignResponse(
            success=False, error=self.error, fbtrace_id=self.fbtrace_id
        )


class LaunchCampaignResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    campaign_id: Optional[str] = Field(default=None, alias="campaignId")
    adset_id: Optional[str] = Field(default=None, alias="adsetId")
    creative_id: Optional[str] = Field(default=None, alias="creativeId")
    ad_id: Optional[str] = Field(default=None, alias="adId")
    error: Optional[str] = None
    fbtrace_id: Optional[str] = None
