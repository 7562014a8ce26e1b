# ============================================================
# Literature Companion FastAPI App
# ------------------------------------------------------------
# Wires the chat relay behind a browser-callable endpoint:
#   - permissive CORS on every response, bare OPTIONS preflight
#   - POST {"message"} -> {"response"} or {"error"}
#   - health checks
# ============================================================

import logging
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

# --- Local imports ---
from litbot.errors import InternalRelayError, RelayError
from litbot.relay import ChatRelay
from litbot.schemas import ChatReply, ErrorPayload
from litbot.settings import Settings, settings as default_settings

logging.basicConfig(
    level=default_settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

CHAT_PATHS = ("/", "/ai", "/functions/v1/ai")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title=settings.APP_NAME, version="0.1.0")
    app.state.settings = settings
    app.state.relay = ChatRelay.from_settings(settings)

    # ------------------------------------------------------------
    # 🌐 CORS: preflight short-circuit + headers on everything
    # ------------------------------------------------------------
    @app.middleware("http")
    async def cors(request: Request, call_next):  # type: ignore[no-untyped-def]
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(RelayError)
    async def relay_error_handler(_request: Request, exc: RelayError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorPayload(error=exc.message).model_dump(),
        )

    # ------------------------------------------------------------
    # 💬 Chat relay route
    # ------------------------------------------------------------
    async def chat(request: Request) -> ChatReply:
        relay: ChatRelay = request.app.state.relay
        try:
            payload = await request.json()
            req = relay.parse_request(payload)
            return await run_in_threadpool(relay.reply, req)
        except RelayError:
            raise
        except Exception as e:
            logger.exception("relay_internal_error path=%s", request.url.path)
            raise InternalRelayError(str(e)) from e

    for path in CHAT_PATHS:
        app.add_api_route(path, chat, methods=["POST"], response_model=ChatReply)

    # ------------------------------------------------------------
    # 🧭 Health checks
    # ------------------------------------------------------------
    @app.get("/healthz")
    def healthz(request: Request):
        return {
            "ok": True,
            "env": settings.ENV,
            "debug": settings.DEBUG,
            "app": settings.APP_NAME,
            "ai_available": request.app.state.relay.available,
        }

    @app.get("/health")
    def health():
        return {"status": "ok", "env": settings.ENV}

    @app.get("/")
    def hello():
        return {"message": f"{settings.APP_NAME} relay running."}

    return app


app = create_app()
