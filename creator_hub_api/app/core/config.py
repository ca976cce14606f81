"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts without any configuration; in a production
deployment you should at least override ``SECRET_KEY`` and
``STRIPE_SECRET_KEY``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Creator Hub API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Interval, in seconds, between sweeps of expired sessions.  The
    # default prunes once a day.
    session_check_period: int = int(os.getenv("SESSION_CHECK_PERIOD", str(24 * 60 * 60)))

    # Stripe credentials.  Payment routes fail with a 500 response
    # until ``STRIPE_SECRET_KEY`` is set.
    stripe_secret_key: str = os.getenv("STRIPE_SECRET_KEY", "")
    stripe_api_base: str = os.getenv("STRIPE_API_BASE", "https://api.stripe.com/v1")

    # Price of the premium plan in the smallest currency unit
    # (999 cents = $9.99).
    premium_price_cents: int = int(os.getenv("PREMIUM_PRICE_CENTS", "999"))
    premium_currency: str = os.getenv("PREMIUM_CURRENCY", "usd")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
