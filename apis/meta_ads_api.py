from functools import lru_cache

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from adapters.meta.client import MetaAdsClient
from models.meta.launch_request import LaunchCampaignRequest, LaunchResult
from services.meta.campaign_launch_service import CampaignLaunchService

router = APIRouter(prefix="/api/meta", tags=["meta-ads"])


@lru_cache(maxsize=1)
def get_meta_ads_client() -> MetaAdsClient:
    # credentials are read and checked once per process
    return MetaAdsClient()


def get_campaign_launch_service(
    client: MetaAdsClient = Depends(get_meta_ads_client),
) -> CampaignLaunchService:
    return CampaignLaunchService(client)


def _status_code(result: LaunchResult) -> int:
    if result.success:
        return status.HTTP_200_OK
    if result.is_validation_failure:
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


# Launch a paused campaign stack

@router.post("/launch")
async def launch_campaign(
    request: LaunchCampaignRequest,
    service: CampaignLaunchService = Depends(get_campaign_launch_service),
):
    result = await service.launch(request)
    return JSONResponse(
        content=result.to_response().model_dump(by_alias=True, exclude_none=True),
        status_code=_status_code(result),
    )
