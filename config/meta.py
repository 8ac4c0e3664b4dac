import os
from dataclasses import dataclass, field

META_GRAPH_HOST = "https://graph.facebook.com"
META_DEFAULT_API_VERSION = "v18.0"
META_AD_ACCOUNT_PREFIX = "act_"

# ===== TRANSPORT =====
META_HTTP_TIMEOUT = 60.0
META_HTTP_CONNECT_TIMEOUT = 10.0
META_MAX_CONNECTIONS = 100
META_MAX_KEEPALIVE = 20

# ===== LAUNCH DEFAULTS =====
# 10000 paise = INR 100, above the account's observed INR 89.89 minimum
ADSET_DAILY_BUDGET = 10000
ADSET_START_DELAY_MINUTES = 15
ADSET_RUN_DAYS = 7
ADSET_COUNTRIES = ["IN"]
ADSET_AGE_MIN = 21
ADSET_AGE_MAX = 40

# credential field -> environment variable
CREDENTIAL_ENV_VARS = {
    "app_id": "META_APP_ID",
    "app_secret": "META_APP_SECRET",
    "access_token": "META_ACCESS_TOKEN",
    "ad_account_id": "META_AD_ACCOUNT_ID",
    "page_id": "META_PAGE_ID",
}


def normalize_ad_account_id(ad_account_id: str) -> str:
    """Prefix the account id with ``act_`` unless it already carries it."""
    if ad_account_id and not ad_account_id.startswith(META_AD_ACCOUNT_PREFIX):
        return f"{META_AD_ACCOUNT_PREFIX}{ad_account_id}"
    return ad_account_id


@dataclass(frozen=True)
class MetaCredentials:
    app_id: str = ""
    app_secret: str = ""
    access_token: str = field(default="", repr=False)
    ad_account_id: str = ""
    page_id: str = ""
    api_version: str = META_DEFAULT_API_VERSION

    def __post_init__(self):
        object.__setattr__(
            self, "ad_account_id", normalize_ad_account_id(self.ad_account_id)
        )

    @classmethod
    def from_env(cls) -> "MetaCredentials":
        values = {
            name: os.getenv(env_var, "")
            for name, env_var in CREDENTIAL_ENV_VARS.items()
        }
        return cls(
            **values,
            api_version=os.getenv("META_API_VERSION") or META_DEFAULT_API_VERSION,
        )

    @property
    def base_url(self) -> str:
        return f"{META_GRAPH_HOST}/{self.api_version}"

    def missing_fields(self) -> list[str]:
        """Environment variable names of the credentials that are empty."""
        return [
            env_var
            for name, env_var in CREDENTIAL_ENV_VARS.items()
            if not getattr(self, name)
        ]
