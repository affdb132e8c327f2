"""Logfire setup and instrumentation.

Spans and structured events are emitted with ``logfire`` directly::

    with logfire.span("federated_authn.claim", provider="google"):
        logfire.info("Platform created", platform_id=platform.id)

Client secrets, authorization codes and tokens never go into attributes.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from authn.config import Settings

SERVICE_NAME = "authn"

# Scrubbed on top of Logfire's defaults (password, secret, token, ...)
SCRUB_PATTERNS = ["client_secret", "id_token", "authorization_code"]


def _should_send(settings: Settings) -> bool:
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return settings.observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is built.

    Without ``OBSERVABILITY__LOGFIRE_TOKEN`` (or with
    ``OBSERVABILITY__SEND_TO_LOGFIRE=false``) spans only go to the console.
    """
    send = _should_send(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request.

    Only method, path and client host are recorded; headers are left out
    because they carry session tokens.
    """

    def _request_attributes(request, attributes):
        result = {**attributes, "path": request.url.path}
        if hasattr(request, "method"):
            result["method"] = request.method  # absent on websockets
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outgoing calls to identity providers."""
    logfire.instrument_httpx()
