import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from expedition.api.v1.admin import router as admin_router
from expedition.api.v1.content import router as content_router
from expedition.api.v1.registrations import router as registrations_router
from expedition.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("registration_id", "session_id", "status", "backend", "error", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

logger = logging.getLogger(__name__)

app = FastAPI(title="Dubai Business Expedition", version="1.0.0")

app.include_router(content_router, prefix="/api/v1", tags=["content"])
app.include_router(registrations_router, prefix="/api/v1/registrations", tags=["registrations"])
app.include_router(admin_router, prefix="/api/v1/admin", tags=["admin"])


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"error": str(exc), "reason": request.url.path})
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
