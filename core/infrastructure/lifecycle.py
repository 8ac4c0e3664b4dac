import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
import structlog

from config.meta import MetaCredentials
from core.infrastructure.http_client import init_http_client, close_http_client
from core.metadata import SERVICE_NAME, VERSION

logger = structlog.get_logger(__name__)

STARTUP_BANNER = """
╔══════════════════════════════════════════════╗
║  {service} v{version}
║  Python {python} | env: {env} | {log_level}
║  Meta Graph API {api_version} | account: {account}
╚══════════════════════════════════════════════╝"""

SHUTDOWN_BANNER = """
╔══════════════════════════════════════════════╗
║  {service} v{version} shutting down
╚══════════════════════════════════════════════╝"""


def check_meta_credentials() -> MetaCredentials:
    credentials = MetaCredentials.from_env()
    missing = credentials.missing_fields()
    if missing:
        # launches will fail with a provider error until these are set
        logger.warning(
            "Meta credentials incomplete", component="meta", missing=missing
        )
    else:
        logger.info(
            "Meta credentials loaded",
            component="meta",
            api_version=credentials.api_version,
            ad_account_id=credentials.ad_account_id,
        )
    return credentials


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_http_client()
    logger.info("HTTP client initialized", component="http")

    credentials = check_meta_credentials()

    environment = os.getenv("ENVIRONMENT", "local")
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    python_version = sys.version.split()[0]

    print(
        STARTUP_BANNER.format(
            service=SERVICE_NAME,
            version=VERSION,
            python=python_version,
            env=environment,
            log_level=log_level,
            api_version=credentials.api_version,
            account=credentials.ad_account_id or "-",
        )
    )
    logger.info(
        "Service started",
        service=SERVICE_NAME,
        version=VERSION,
        python=python_version,
        environment=environment,
        log_level=log_level,
    )
    try:
        yield
    finally:
        print(SHUTDOWN_BANNER.format(service=SERVICE_NAME, version=VERSION))
        logger.info("Service shutting down", service=SERVICE_NAME, version=VERSION)
        await close_http_client()
        logger.info("HTTP client closed", component="http")
