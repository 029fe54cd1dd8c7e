from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from apis import events, health
from core.common.app_settings import settings
from core.common.base import UNEXPECTED_ERROR_MESSAGE, VERSION
from core.common.log import logger
from core.events import render_error_page


app = FastAPI(
    title=f"{settings.app_name} Web",
    description="Server-rendered listing of vendor events near a location",
    version=VERSION,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
)

app.include_router(health.router)
app.include_router(events.router)


@app.exception_handler(Exception)
async def unexpected_error_page(request: Request, exc: Exception) -> HTMLResponse:
    logger.opt(exception=exc).error(
        f"[web] unhandled error on {request.method} {request.url.path}: {exc!r}"
    )
    return HTMLResponse(render_error_page(UNEXPECTED_ERROR_MESSAGE), status_code=500)
