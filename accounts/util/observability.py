"""Logfire setup for the accounts service.

Use ``logfire`` directly in services and use cases:

    logfire.info("User signed up", user_id=str(user.id))

    with logfire.span("sign_up_request", email=email):
        ...

Confirmation, reset and email change tokens as well as password hashes are
scrubbed from every span and log attribute.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from accounts.config import Settings

SCRUB_PATTERNS = ["token", "password_hash", "reset_password"]


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is configured."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the running environment.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    logfire.configure(
        service_name="accounts-api",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    # Validated request bodies carry passwords, keep only the route
    result = {k: v for k, v in attributes.items() if k != "values"}
    if hasattr(request, "method"):
        result["method"] = request.method
    if hasattr(request, "url"):
        result["path"] = request.url.path
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request with its method, path and duration."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
