import uvicorn
from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from recap.env import max_body_size_bytes
from recap.logs import get_logger, uvicorn_log_config

log = get_logger(__name__)

body_too_large_message = 'Request body is too large'


class RequestBodyTooLarge(HTTPException):
    def __init__(self):
        super().__init__(status_code=413, detail=body_too_large_message)


class BodySizeLimitMiddleware:
    """
    Rejects request bodies above MAX_BODY_SIZE_BYTES. The Content-Length header is checked
    upfront, bodies without one (chunked) are counted while the app reads them.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope['type'] != 'http':
            await self.app(scope, receive, send)
            return

        limit = max_body_size_bytes
        content_length = Headers(scope=scope).get('content-length')

        if content_length and content_length.isdigit() and int(content_length) > limit:
            log.warning(f'Rejected request to {scope["path"]}: body of {content_length} bytes is too large')
            response = JSONResponse(status_code=413, content={'error': body_too_large_message})
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received

            message = await receive()

            if message['type'] == 'http.request':
                received += len(message.get('body', b''))

                if received > limit:
                    log.warning(f'Rejected request to {scope["path"]}: body exceeds {limit} bytes')
                    raise RequestBodyTooLarge()

            return message

        await self.app(scope, limited_receive, send)


async def body_too_large_handler(request: Request, exc: RequestBodyTooLarge):
    return JSONResponse(status_code=413, content={'error': exc.detail})


def create_app(**kwargs):
    app = FastAPI(**kwargs)

    app.add_exception_handler(RequestBodyTooLarge, body_too_large_handler)
    app.add_middleware(BodySizeLimitMiddleware)

    # outermost, 413 responses need the CORS headers too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=['*'],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


error_responses = {
    400: {"description": "Invalid payload"},
    413: {"description": "The request body is too large"},
    502: {"description": "The upstream provider failed"},
    503: {"description": "The upstream provider is not configured"},
}


def get_router() -> APIRouter:
    return APIRouter(responses=error_responses)


async def create_webserver(app, port):
    server_config = uvicorn.Config(
        app,
        host='0.0.0.0',
        port=port,
        log_config=uvicorn_log_config,
    )
    server = uvicorn.Server(server_config)
    await server.serve()
