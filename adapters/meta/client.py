from datetime import datetime, timedelta, timezone
from typing import Any, Optional, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from adapters.meta.exceptions import MetaAPIError
from adapters.meta.models import (
    AdSetTargeting,
    CampaignObjective,
    EntityStatus,
    GeoLocations,
    MetaAd,
    MetaAdCreative,
    MetaAdImage,
    MetaAdSet,
    MetaCampaign,
    OptimizationGoal,
)
from config.meta import (
    ADSET_AGE_MAX,
    ADSET_AGE_MIN,
    ADSET_COUNTRIES,
    ADSET_DAILY_BUDGET,
    ADSET_RUN_DAYS,
    ADSET_START_DELAY_MINUTES,
    MetaCredentials,
)
from core.infrastructure.http_client import get_http_client

logger = structlog.get_logger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)


def adset_schedule(now: Optional[datetime] = None) -> tuple[str, str]:
    """Return ISO-8601 ``(start_time, end_time)`` for a new ad set.

    Meta rejects start times in the past, so the ad set starts a fixed lead
    time after ``now`` and runs for a fixed window from ``now``.
    """
    now = now or datetime.now(timezone.utc)
    start = now + timedelta(minutes=ADSET_START_DELAY_MINUTES)
    end = now + timedelta(days=ADSET_RUN_DAYS)
    return start.isoformat(), end.isoformat()


class MetaAdsClient:
    """Graph API client bound to one ad account and page."""

    def __init__(
        self,
        credentials: Optional[MetaCredentials] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.credentials = credentials or MetaCredentials.from_env()
        self._http_client = http_client
        self.base_url = self.credentials.base_url

        missing = self.credentials.missing_fields()
        if missing:
            logger.warning("meta_credentials_missing", missing=missing)

    @property
    def ad_account_id(self) -> str:
        return self.credentials.ad_account_id

    @property
    def page_id(self) -> str:
        return self.credentials.page_id

    def _client(self) -> httpx.AsyncClient:
        return self._http_client or get_http_client()

    async def post(self, endpoint: str, json: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", endpoint, json=json)

    async def _request(
        self,
        method: str,
        endpoint: str,
        json: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        query = {"access_token": self.credentials.access_token}
        if json is not None:
            logger.debug("Meta API request", endpoint=endpoint, body=json)

        try:
            response = await self._client().request(
                method, url, params=query, json=json
            )
        except httpx.HTTPError as e:
            logger.error("Meta API transport error", endpoint=endpoint, error=str(e))
            raise MetaAPIError.from_transport_error(e) from e

        return self._handle_response(endpoint, response)

    def _handle_response(
        self, endpoint: str, response: httpx.Response
    ) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success or not isinstance(data, dict) or "error" in data:
            error = MetaAPIError.from_response(response)
            logger.error(
                "Meta API error",
                endpoint=endpoint,
                status=response.status_code,
                error=data if data is not None else response.text[:500],
                fbtrace_id=error.fbtrace_id,
            )
            raise error

        return data

    def _parse(self, model: type[EntityT], data: dict[str, Any]) -> EntityT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(
                "Unexpected Meta API response", model=model.__name__, body=data
            )
            raise MetaAPIError(
                f"Unexpected response from Meta API for {model.__name__}",
                status_code=502,
                error_data=data,
            ) from e

    async def create_campaign(self, name: str) -> MetaCampaign:
        data = await self.post(
            f"{self.ad_account_id}/campaigns",
            json={
                "name": name,
                "objective": CampaignObjective.OUTCOME_TRAFFIC.value,
                "status": EntityStatus.PAUSED.value,
                "special_ad_categories": [],
            },
        )
        return self._parse(MetaCampaign, data)

    async def create_adset(
        self,
        campaign_id: str,
        name: str,
        now: Optional[datetime] = None,
    ) -> MetaAdSet:
        start_time, end_time = adset_schedule(now)
        targeting = AdSetTargeting(
            geo_locations=GeoLocations(countries=list(ADSET_COUNTRIES)),
            age_min=ADSET_AGE_MIN,
            age_max=ADSET_AGE_MAX,
        )
        # billing_event and bid_strategy are left to Meta's defaults
        data = await self.post(
            f"{self.ad_account_id}/adsets",
            json={
                "name": name,
                "campaign_id": campaign_id,
                "daily_budget": ADSET_DAILY_BUDGET,
                "optimization_goal": OptimizationGoal.LINK_CLICKS.value,
                "targeting": targeting.model_dump(),
                "start_time": start_time,
                "end_time": end_time,
                "status": EntityStatus.PAUSED.value,
            },
        )
        return self._parse(MetaAdSet, data)

    async def upload_image(self, url: str) -> MetaAdImage:
        data = await self.post(f"{self.ad_account_id}/adimages", json={"url": url})
        return self._parse(MetaAdImage, data)

    async def create_creative(
        self,
        name: str,
        message: str,
        link: str,
        image_hash: str,
    ) -> MetaAdCreative:
        data = await self.post(
            f"{self.ad_account_id}/adcreatives",
            json={
                "name": name,
                "object_story_spec": {
                    "page_id": self.page_id,
                    "link_data": {
                        "image_hash": image_hash,
                        "link": link,
                        "message": message,
                    },
                },
            },
        )
        return self._parse(MetaAdCreative, data)

    async def create_ad(self, name: str, adset_id: str, creative_id: str) -> MetaAd:
        data = await self.post(
            f"{self.ad_account_id}/ads",
            json={
                "name": name,
                "adset_id": adset_id,
                "creative": {"creative_id": creative_id},
                "status": EntityStatus.PAUSED.value,
            },
        )
        return self._parse(MetaAd, data)
