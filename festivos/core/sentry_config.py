# festivos/core/sentry_config.py
"""
Sentry configuration for error tracking in production.
"""

import logging
import os

from festivos.core.config import IS_PRODUCTION, SERVICE_NAME, SERVICE_VERSION

logger = logging.getLogger(__name__)


def init_sentry(production: bool = IS_PRODUCTION) -> bool:
    """
    Initialize Sentry error tracking.

    Returns:
        True if Sentry was initialized successfully, False otherwise.
    """
    sentry_dsn = os.getenv("SENTRY_DSN", "").strip()

    if not production:
        logger.info("Sentry disabled in development mode")
        return False

    if not sentry_dsn:
        logger.warning(
            "SENTRY_DSN not set. Error tracking disabled. "
            "Set SENTRY_DSN environment variable to enable Sentry in production."
        )
        return False

    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.logging import LoggingIntegration
        from sentry_sdk.integrations.starlette import StarletteIntegration
    except ImportError:
        logger.warning("Sentry SDK not installed. Install with: pip install sentry-sdk[fastapi]")
        return False

    environment = os.getenv("SENTRY_ENVIRONMENT", "production")
    sentry_sdk.init(
        dsn=sentry_dsn,
        integrations=[
            FastApiIntegration(),
            StarletteIntegration(),
            LoggingIntegration(
                level=logging.INFO,  # Breadcrumbs from INFO and above
                event_level=logging.ERROR,  # Send errors and above as events
            ),
        ],
        traces_sample_rate=0.1,
        sample_rate=1.0,
        release=os.getenv("RELEASE_VERSION", f"{SERVICE_NAME}@{SERVICE_VERSION}"),
        environment=environment,
        send_default_pii=False,
        attach_stacktrace=True,
        before_send=before_send_hook,
    )

    logger.info(f"Sentry initialized successfully (environment: {environment})")
    return True


def before_send_hook(event, hint):
    """
    Filter sensitive headers before sending to Sentry.

    Args:
        event: Sentry event data
        hint: Additional context

    Returns:
        Modified event
    """
    headers = event.get("request", {}).get("headers")
    if headers:
        for header in ("cookie", "authorization", "x-api-key"):
            if header in headers:
                headers[header] = "[Filtered]"
    return event
