from adapters.meta.client import MetaAdsClient, adset_schedule
from adapters.meta.exceptions import MetaAPIError

__all__ = ["MetaAdsClient", "MetaAPIError", "adset_schedule"]
