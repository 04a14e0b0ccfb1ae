"""
Configuration — Payment Service
Everything is read from the environment (a local .env is honoured) and can be
overridden by passing a mapping to create_app().
"""

import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_ALLOWED_ORIGINS = (
    "https://ticket-swpper3.vercel.app",
    "http://localhost:5173",
    "http://localhost:3000",
)


def _database_uri():
    url = os.environ.get("DATABASE_URL")
    if url:
        return url

    # Same composition the other services use, but only when fully configured
    parts = [os.environ.get(k) for k in ("DB_USER", "DB_PASS", "DB_HOST", "DB_NAME")]
    if all(parts):
        db_user, db_pass, db_host, db_name = parts
        return f"postgresql://{db_user}:{db_pass}@{db_host}/{db_name}"
    return None


def _split(value):
    return [v.strip() for v in value.split(",") if v.strip()]


class Config:
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.environ.get("JWT_SECRET")
    JWT_DECODE_AUDIENCE = os.environ.get("JWT_AUDIENCE")

    RAZORPAY_KEY_ID = os.environ.get("RAZORPAY_KEY_ID")
    RAZORPAY_KEY_SECRET = os.environ.get("RAZORPAY_KEY_SECRET")

    EXTERNAL_SUPABASE_URL = os.environ.get("EXTERNAL_SUPABASE_URL")
    EXTERNAL_SUPABASE_SERVICE_ROLE_KEY = os.environ.get("EXTERNAL_SUPABASE_SERVICE_ROLE_KEY")
    EXTERNAL_SUPABASE_ANON_KEY = os.environ.get("EXTERNAL_SUPABASE_ANON_KEY")
    EXTERNAL_TICKETS_TABLE = os.environ.get("EXTERNAL_TICKETS_TABLE", "tickets")
    EXTERNAL_SYNC_TIMEOUT = float(os.environ.get("EXTERNAL_SYNC_TIMEOUT", "5"))

    CORS_ALLOWED_ORIGINS = _split(os.environ.get("CORS_ALLOWED_ORIGINS", "")) or list(DEFAULT_ALLOWED_ORIGINS)

    EXPOSE_ERROR_STACK = os.environ.get("EXPOSE_ERROR_STACK", "false").lower() in ("1", "true", "yes")
