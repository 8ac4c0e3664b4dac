import unittest
from unittest.mock import AsyncMock, call

from adapters.meta.client import MetaAdsClient
from adapters.meta.exceptions import MetaAPIError
from adapters.meta.models import (
    MetaAd,
    MetaAdCreative,
    MetaAdImage,
    MetaAdSet,
    MetaCampaign,
)
from models.meta.launch_request import LaunchCampaignRequest, LaunchStage
from services.meta.campaign_launch_service import (
    MISSING_FIELDS_ERROR,
    MISSING_IMAGE_ERROR,
    CampaignLaunchService,
)


class TestCampaignLaunchService(unittest.IsolatedAsyncioTestCase):
    """Launch sequencing against a mocked Meta client."""

    def setUp(self):
        self.client = AsyncMock(spec=MetaAdsClient)
        self.client.create_campaign.return_value = MetaCampaign(
            id="cmp_1", name="Summer Sale", status="PAUSED"
        )
        self.client.create_adset.return_value = MetaAdSet(
            id="adset_1", campaign_id="cmp_1", status="PAUSED"
        )
        self.client.upload_image.return_value = MetaAdImage(
            hash="hash_1", url="https://img.example.com/a.png"
        )
        self.client.create_creative.return_value = MetaAdCreative(id="creative_1")
        self.client.create_ad.return_value = MetaAd(id="ad_1", status="PAUSED")

        self.service = CampaignLaunchService(self.client)
        self.request = LaunchCampaignRequest(
            campaignName="Summer Sale",
            message="50% off",
            link="https://example.com",
            imageUrl="https://img.example.com/a.png",
        )

    async def test_successful_launch_runs_steps_in_order(self):
        result = await self.service.launch(self.request)

        self.assertTrue(result.success)
        self.assertEqual(result.stage, LaunchStage.DONE)
        self.assertEqual(result.progress.campaign_id, "cmp_1")
        self.assertEqual(result.progress.adset_id, "adset_1")
        self.assertEqual(result.progress.creative_id, "creative_1")
        self.assertEqual(result.progress.ad_id, "ad_1")
        self.assertEqual(
            self.client.mock_calls,
            [
                call.create_campaign("Summer Sale"),
                call.create_adset("cmp_1", "Summer Sale - Ad Set"),
                call.upload_image("https://img.example.com/a.png"),
                call.create_creative(
                    "Summer Sale - Creative", "50% off", "https://example.com", "hash_1"
                ),
                call.create_ad("Summer Sale - Ad", "adset_1", "creative_1"),
            ],
        )

        response = result.to_response().model_dump(by_alias=True, exclude_none=True)
        self.assertEqual(
            response,
            {
                "success": True,
                "campaignId": "cmp_1",
                "adsetId": "adset_1",
                "creativeId": "creative_1",
                "adId": "ad_1",
            },
        )

    async def test_missing_required_fields_make_no_calls(self):
        for missing in ("campaignName", "message", "link"):
            payload = {
                "campaignName": "Summer Sale",
                "message": "50% off",
                "link": "https://example.com",
                "imageUrl": "https://img.example.com/a.png",
                missing: "  ",
            }
            with self.subTest(missing=missing):
                result = await self.service.launch(LaunchCampaignRequest(**payload))

                self.assertFalse(result.success)
                self.assertEqual(result.failed_stage, LaunchStage.VALIDATING)
                self.assertTrue(result.is_validation_failure)
                self.assertEqual(result.error, MISSING_FIELDS_ERROR)

        self.assertEqual(self.client.mock_calls, [])

    async def test_missing_image_fails_before_any_call(self):
        request = self.request.model_copy(update={"image_url": None})

        result = await self.service.launch(request)

        self.assertFalse(result.success)
        self.assertEqual(result.failed_stage, LaunchStage.VALIDATING)
        self.assertEqual(result.error, MISSING_IMAGE_ERROR)
        self.assertEqual(self.client.mock_calls, [])

    async def test_adset_failure_stops_launch_without_rollback(self):
        self.client.create_adset.side_effect = MetaAPIError(
            "Invalid parameter", fbtrace_id="AbC123", status_code=400
        )

        result = await self.service.launch(self.request)

        self.assertFalse(result.success)
        self.assertEqual(result.stage, LaunchStage.FAILED)
        self.assertEqual(result.failed_stage, LaunchStage.CREATING_ADSET)
        self.assertEqual(result.error, "Invalid parameter")
        self.assertEqual(result.fbtrace_id, "AbC123")
        self.assertEqual(result.progress.campaign_id, "cmp_1")
        self.assertIsNone(result.progress.adset_id)
        self.client.upload_image.assert_not_called()
        self.client.create_creative.assert_not_called()
        self.client.create_ad.assert_not_called()

    async def test_unexpected_error_uses_raw_text(self):
        self.client.create_creative.side_effect = RuntimeError("boom")

        result = await self.service.launch(self.request)

        self.assertFalse(result.success)
        self.assertEqual(result.failed_stage, LaunchStage.CREATING_CREATIVE)
        self.assertEqual(result.error, "boom")
        self.assertIsNone(result.fbtrace_id)
        self.assertEqual(result.progress.image_hash, "hash_1")
        self.client.create_ad.assert_not_called()

        response = result.to_response().model_dump(by_alias=True, exclude_none=True)
        self.assertEqual(response, {"success": False, "error": "boom"})


if __name__ == "__main__":
    unittest.main()
