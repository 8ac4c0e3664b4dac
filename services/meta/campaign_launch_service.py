"""Launch a paused Meta campaign end to end.

One run walks campaign -> ad set -> image -> creative -> ad, feeding each
created id into the next call. The first failing step ends the run; entities
created before it are reported in the result and left in place.
"""

from typing import Optional

import structlog

from adapters.meta.client import MetaAdsClient
from adapters.meta.exceptions import MetaAPIError
from exceptions.custom_exceptions import BusinessValidationException
from models.meta.launch_request import (
    LaunchCampaignRequest,
    LaunchProgress,
    LaunchResult,
    LaunchStage,
)

logger = structlog.get_logger(__name__)

MISSING_FIELDS_ERROR = "Missing required fields: campaignName, message, or link"
MISSING_IMAGE_ERROR = "Image URL is required for this ad format"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class CampaignLaunchService:
    def __init__(self, client: MetaAdsClient):
        self.client = client

    def validate(self, request: LaunchCampaignRequest) -> None:
        if any(
            _is_blank(v)
            for v in (request.campaign_name, request.message, request.link)
        ):
            raise BusinessValidationException(MISSING_FIELDS_ERROR)
        if _is_blank(request.image_url):
            raise BusinessValidationException(MISSING_IMAGE_ERROR)

    async def launch(self, request: LaunchCampaignRequest) -> LaunchResult:
        progress = LaunchProgress()
        stage = LaunchStage.VALIDATING

        try:
            self.validate(request)
        except BusinessValidationException as e:
            logger.warning("Launch request rejected", reason=str(e))
            return self._failed(stage, progress, e.message)

        name = request.campaign_name
        log = logger.bind(campaign_name=name)

        try:
            stage = LaunchStage.CREATING_CAMPAIGN
            campaign = await self.client.create_campaign(name)
            progress.campaign_id = campaign.id
            log.info("Created campaign", campaign_id=campaign.id)

            stage = LaunchStage.CREATING_ADSET
            adset = await self.client.create_adset(campaign.id, f"{name} - Ad Set")
            progress.adset_id = adset.id
            log.info("Created ad set", adset_id=adset.id)

            stage = LaunchStage.UPLOADING_IMAGE
            image = await self.client.upload_image(request.image_url)
            progress.image_hash = image.hash
            log.info("Uploaded image", image_hash=image.hash)

            stage = LaunchStage.CREATING_CREATIVE
            creative = await self.client.create_creative(
                f"{name} - Creative", request.message, request.link, image.hash
            )
            progress.creative_id = creative.id
            log.info("Created creative", creative_id=creative.id)

            stage = LaunchStage.CREATING_AD
            ad = await self.client.create_ad(f"{name} - Ad", adset.id, creative.id)
            progress.ad_id = ad.id
            log.info("Created ad", ad_id=ad.id)
        except MetaAPIError as e:
            log.error(
                "Meta launch failed",
                stage=stage.value,
                error=e.message,
                fbtrace_id=e.fbtrace_id,
                created=progress.model_dump(exclude_none=True),
            )
            return self._failed(stage, progress, e.message, e.fbtrace_id)
        except Exception as e:
            log.error(
                "Meta launch failed",
                stage=stage.value,
                error=str(e),
                created=progress.model_dump(exclude_none=True),
                exc_info=True,
            )
            return self._failed(stage, progress, str(e) or "Internal Server Error")

        return LaunchResult(success=True, stage=LaunchStage.DONE, progress=progress)

    @staticmethod
    def _failed(
        stage: LaunchStage,
        progress: LaunchProgress,
        error: str,
        fbtrace_id: Optional[str] = None,
    ) -> LaunchResult:
        return LaunchResult(
            success=False,
            stage=LaunchStage.FAILED,
            failed_stage=stage,
            progress=progress,
            error=error,
            fbtrace_id=fbtrace_id,
        )
