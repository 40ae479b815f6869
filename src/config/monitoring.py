import logging

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from src.config.settings import settings

logger = logging.getLogger(__name__)


def init_sentry() -> bool:
    """Start Sentry error tracking when a DSN is configured."""
    if not settings.SENTRY_DSN:
        return False

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        # Guest names and RSVP tokens travel in requests
        send_default_pii=False,
    )
    logger.info("Sentry enabled for environment %s", settings.ENVIRONMENT)
    return True
