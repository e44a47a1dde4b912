"""Live binding over WebSocket: /live/{content_id}?token=<admin jwt>.

Each connection binds one content document. The server sends a message
``{"state", "content_id", "data", "error"}`` on every binding transition:
loading, then ready (or error), then ready again whenever the stored
document changes. Client messages are ignored; closing the socket
cancels the subscription.
"""

import asyncio
import contextlib

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from app.api.v1.dependencies import get_auth_service
from app.application.services.content_watcher import LiveContentBinding
from app.domain.enums import ContentId
from app.domain.exceptions import CMSException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


async def _reject_websocket(websocket: WebSocket, reason: str, code: int = 1008) -> None:
    """Accept then immediately close with code/reason so client gets a proper close frame."""
    await websocket.accept()
    await websocket.close(code=code, reason=reason)


async def _drain(websocket: WebSocket) -> None:
    """Read and discard client frames until the client disconnects."""
    with contextlib.suppress(WebSocketDisconnect):
        while True:
            await websocket.receive_text()


@router.websocket("/{content_id}")
async def live_content(websocket: WebSocket, content_id: str):
    """Stream binding state for one document to an admin session."""
    try:
        target = ContentId(content_id)
    except ValueError:
        await _reject_websocket(websocket, "Unknown content id")
        return
    token = websocket.query_params.get("token")
    if not token:
        await _reject_websocket(websocket, "Missing token")
        return
    feed = websocket.app.state.change_feed
    if feed is None:
        await _reject_websocket(websocket, "Firestore is not configured", code=1011)
        return
    try:
        admin = await get_auth_service(websocket).authenticate_token(token)
    except CMSException as e:
        await _reject_websocket(websocket, e.message)
        return

    await websocket.accept()
    binding = LiveContentBinding(
        target,
        websocket.app.state.content_service,
        feed,
        listener=websocket.send_json,
    )
    logger.info("Live binding opened on %s for %s", target.value, admin.email)
    try:
        await binding.start()
        runner = asyncio.create_task(binding.run())
        reader = asyncio.create_task(_drain(websocket))
        done, pending = await asyncio.wait({runner, reader}, return_when=asyncio.FIRST_COMPLETED)
        for task in pending:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        for task in done:
            exc = task.exception()
            if exc is not None and not isinstance(exc, WebSocketDisconnect):
                logger.warning("Live binding on %s ended with error: %s", target.value, exc)
    except WebSocketDisconnect:
        pass
    finally:
        await binding.close()
        logger.info("Live binding closed on %s", target.value)
