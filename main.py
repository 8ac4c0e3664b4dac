from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI

from apis.health_api import router as health_router
from apis.meta_ads_api import router as meta_ads_router
from config.logging_config import setup_logging
from core.infrastructure.lifecycle import lifespan
from core.infrastructure.request_logging_middleware import RequestLoggingMiddleware
from core.metadata import APP_TITLE, VERSION
from exceptions.handlers import setup_exception_handlers

setup_logging()

app = FastAPI(title=APP_TITLE, version=VERSION, lifespan=lifespan)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(health_router)
app.include_router(meta_ads_router)

setup_exception_handlers(app)
