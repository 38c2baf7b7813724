import os
import logging
from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI

from dermacare.session import SessionMiddleware
from dermacare.routers.api import router as api_router
from dermacare.routers.scans import router as scans_router
from dermacare.routers.history import router as history_router
from dermacare.routers.conditions import router as conditions_router
from dermacare.routers.ingredients import router as ingredients_router
from dermacare.routers.profile import router as profile_router

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Derma Care",
    description="Deterministic skin condition screening and ingredient safety analysis",
    version="1.0.0"
)

app.add_middleware(SessionMiddleware)

app.include_router(api_router)
app.include_router(scans_router)
app.include_router(history_router)
app.include_router(conditions_router)
app.include_router(ingredients_router)
app.include_router(profile_router)

logger.info("Derma Care API initialized")
