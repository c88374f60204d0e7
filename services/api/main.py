from __future__ import annotations

import logging
import os

from genlanding.api import create_app
from genlanding.design_engine import DesignEngine
from genlanding.gemini_adapter import DEFAULT_MODEL, GeminiAdapter
from genlanding.logging_config import setup_logging
from genlanding.secret_manager import access_secret

# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
GEMINI_LOCATION = os.getenv("GEMINI_LOCATION", "us-central1")
GEMINI_API_KEY_SECRET = os.getenv("GEMINI_API_KEY_SECRET", "gemini-api-key")

# Setup logging
setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)
logger = logging.getLogger(__name__)

# Prefer an explicit key, then Secret Manager, then Vertex AI credentials
api_key = os.getenv("GEMINI_API_KEY")
if not api_key and PROJECT_ID:
    api_key = access_secret(PROJECT_ID, GEMINI_API_KEY_SECRET)

adapter = GeminiAdapter(
    api_key=api_key,
    project_id=PROJECT_ID,
    location=GEMINI_LOCATION,
    model_name=GEMINI_MODEL,
)

logger.info(
    "Starting GenLanding API",
    extra={
        "environment": ENVIRONMENT,
        "model": GEMINI_MODEL,
        "backend": "gemini-api" if api_key else "vertex-ai",
    },
)

app = create_app(engine=DesignEngine(adapter), project_id=PROJECT_ID)
