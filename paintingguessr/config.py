# ABOUTME: Application configuration for the painting catalog, sampling and daily challenge
# ABOUTME: Centralized config so tunables can be overridden from the environment

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Metropolitan Museum of Art collection API
    MET_API_BASE = os.getenv(
        "MET_API_BASE", "https://collectionapi.metmuseum.org/public/collection/v1"
    )
    MET_REQUEST_TIMEOUT_SECONDS = int(os.getenv("MET_REQUEST_TIMEOUT_SECONDS", "10"))
    MET_MAX_CONCURRENT_REQUESTS = int(os.getenv("MET_MAX_CONCURRENT_REQUESTS", "8"))

    # Object id list is large and rarely changes: refresh once a day
    OBJECT_ID_CACHE_TTL_HOURS = int(os.getenv("OBJECT_ID_CACHE_TTL_HOURS", "24"))

    # Sampling: each round oversamples the remaining need to absorb rejections
    MAX_SAMPLING_ROUNDS = int(os.getenv("MAX_SAMPLING_ROUNDS", "5"))
    SAMPLING_OVERSAMPLE_FACTOR = int(os.getenv("SAMPLING_OVERSAMPLE_FACTOR", "3"))

    # Paintings per session
    DEFAULT_PAINTING_COUNT = int(os.getenv("DEFAULT_PAINTING_COUNT", "5"))
    MAX_PAINTING_COUNT = int(os.getenv("MAX_PAINTING_COUNT", "20"))
    DAILY_PAINTING_COUNT = 5

    # Widest yearStart/yearEnd window still considered fair to score
    MAX_YEAR_RANGE_SPAN = int(os.getenv("MAX_YEAR_RANGE_SPAN", "50"))

    # Daily challenge resets at midnight "EST" (fixed UTC-5, no DST)
    REFERENCE_UTC_OFFSET_HOURS = -5
    # Bump to invalidate previously served daily sets
    DAILY_SEED_VERSION = os.getenv("DAILY_SEED_VERSION", "_v2")

    # Daily progress snapshots (one JSON file per day)
    SESSION_STORE_DIR = os.getenv("SESSION_STORE_DIR", "data/sessions")

    SITE_URL = os.getenv("SITE_URL", "paintingguessr.com")
    PORT = int(os.getenv("PORT", "8080"))

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
