"""GitHub webhook router."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from fastapi import APIRouter, Header, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from hookcast.config import settings
from hookcast.schemas import RenderedEvent
from hookcast.services.dispatch import Rendered, render_event
from hookcast.services.shortener import default_shortener
from hookcast.utils import gh_verify

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/wh", tags=["github"])


@router.post("", response_model=RenderedEvent)
async def github_webhook(
    request: Request,
    x_hub_signature_256: str | None = Header(None),
    x_github_event: str | None = Header(None),
):
    """
    GitHub webhook endpoint.

    When ``WEBHOOK_SECRET`` is set the payload signature is validated against
    `X-Hub-Signature-256`. The rendered lines are returned in order, one per
    chat message; unsupported event kinds come back as ``ignored``.
    """
    body = await request.body()
    if settings.webhook_secret and not gh_verify(
        settings.webhook_secret, body, x_hub_signature_256
    ):
        raise HTTPException(401, "Invalid signature")

    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise HTTPException(400, "Payload is not valid JSON") from exc
    if not isinstance(payload, Mapping):
        raise HTTPException(400, "Payload must be a JSON object")

    event = x_github_event or "unknown"
    result = await run_in_threadpool(
        render_event, event, payload, shortener=default_shortener()
    )
    if not isinstance(result, Rendered):
        return RenderedEvent(event=result.event, status="ignored")

    for line in result.lines:
        logger.info("[%s] %r", result.event, line)
    return RenderedEvent(event=result.event, status="rendered", lines=list(result.lines))
