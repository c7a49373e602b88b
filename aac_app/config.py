# aac_app/config.py

import os
from dotenv import load_dotenv


load_dotenv()


# Base URL of the FastAPI backend
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD", "glpaac-cookie-secret")

DEFAULT_VOICES = [
    "Google US English",
    "Google UK English Female",
    "Google UK English Male",
    "Samantha",
    "Microsoft Zira - English (United States)",
]

AVAILABLE_VOICES = [
    name.strip() for name in os.getenv("AAC_VOICES", "").split(",") if name.strip()
] or DEFAULT_VOICES
