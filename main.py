from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from contextlib import asynccontextmanager
import logging

from app.config import settings
from app.database import engine, Base
from app.rate_limit import limiter
from app.routes import leads, registrations, analytics, auth, games

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("✅ Database tables created")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


# ─── Format des erreurs : toujours {"message": ...} ──────────────────────────

def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "path", "query", "header")]
    return ".".join(parts)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for err in exc.errors():
        errors.setdefault(_field_name(err["loc"]), []).append(err["msg"])
    first = exc.errors()[0] if exc.errors() else {"loc": (), "msg": "Validation failed"}
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": first["msg"], "field": _field_name(first["loc"]), "errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


app.add_middleware(GZipMiddleware, minimum_size=1000)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(leads.router,             prefix="/api/leads",           tags=["leads"])
app.include_router(registrations.router,     prefix="/api",                 tags=["registrations"])
app.include_router(analytics.router,         prefix="/api",                 tags=["analytics"])
app.include_router(auth.router,              prefix="/api/admin",           tags=["admin"])
app.include_router(games.marrakech_router,   prefix="/api/games/marrakech", tags=["games"])
app.include_router(games.toulouse_router,    prefix="/api/games/toulouse",  tags=["games"])


@app.get("/", include_in_schema=False)
def root():
    return {"status": "ok", "service": settings.APP_NAME}

@app.get("/health", include_in_schema=False)
def health():
    return {"status": "healthy"}
