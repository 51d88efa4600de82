## Main application entry point
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.auth.routes import router as auth_router
from app.db.session import init_db
from app.errors import AppError
from app.insights.routes import router as insights_router
from app.interview.routes import router as interview_router
from app.logging_config import configure_logging
from app.resume.routes import router as resume_router
from app.users.routes import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db()
    logger.info("Career coach API started")
    yield


app = FastAPI(title="Career Coach API", lifespan=lifespan)

@app.get("/health")
async def health():
    return {"status": "ok"}

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(insights_router)
app.include_router(interview_router)
app.include_router(resume_router)
