import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from classbook.core.config import settings
from classbook.api.deps import principal_from_header
from classbook.core.errors import ApiError, StorageFailure, Unauthorized
from classbook.api.routes.auth import router as auth_router
from classbook.api.routes.user import router as user_router

logging.basicConfig(level=(settings.log_level or "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI()

origins = [o.strip() for o in (settings.cors_origins or "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    if isinstance(exc, StorageFailure):
        logger.error(
            "storage failure on %s %s",
            request.method,
            request.url.path,
            exc_info=exc.__cause__ or exc,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.body())

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # body parsing runs before the auth dependency; an anonymous caller still gets 401
    if request.url.path.startswith(user_router.prefix):
        try:
            principal_from_header(request.headers.get("authorization"))
        except Unauthorized as e:
            return JSONResponse(status_code=e.status_code, content=e.body())
    return await request_validation_exception_handler(request, exc)

@app.get("/health")
@app.get("/api/health")
def health():
    return {"status": "ok"}

app.include_router(auth_router)
app.include_router(user_router)
