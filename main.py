import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import CORS_ALLOW_ORIGINS, LOG_LEVEL
from models.database import init_db
from routes.router import router as main_router

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Social Media",
    description="Backend for posts, comments, likes and shares",
    version="1.0.0",
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(CORS_ALLOW_ORIGINS),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(main_router)

ERROR_LABELS = {
    400: "Validation failed",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Internal Server Error",
}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": ERROR_LABELS.get(exc.status_code, "Request failed"), "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": ERROR_LABELS[400], "message": problems})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": ERROR_LABELS[500], "message": "An unexpected error occurred"},
    )


@app.on_event("startup")
def startup():
    logger.info("Creating database tables")
    init_db()


@app.get("/")
def root():
    return {"message": "Welcome to the Social Media API. Posts live under /api/posts."}
