# aac_server/config.py

import os
from dotenv import load_dotenv


load_dotenv()


# -------------------------------
# Database
# -------------------------------

DB_USER = os.getenv("DB_USER", "postgres")
DB_PASSWORD = os.getenv("DB_PASSWORD", "Alabama89!")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_NAME = os.getenv("DB_NAME", "glpaac_db")

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)


# -------------------------------
# Auth
# -------------------------------

JWT_SECRET = os.getenv("JWT_SECRET", "your_jwt_secret")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_HOURS = 24


# -------------------------------
# OpenSymbols
# -------------------------------

OPENSYMBOLS_ACCESS_KEY = os.getenv("OPENSYMBOLS_ACCESS_KEY", "")
OPENSYMBOLS_URL = os.getenv("OPENSYMBOLS_URL", "https://www.opensymbols.org/api/v2/symbols")


# -------------------------------
# Server
# -------------------------------

PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
