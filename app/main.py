from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import logging

from .api.routes.appointments import router as appointments_router
from .api.routes.auth import router as auth_router
from .api.routes.doctors import router as doctors_router
from .api.routes.users import router as users_router
from .core.config import settings
from .core.database import MongoDB

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the MongoDB client on startup and close it on shutdown."""
    logger.info("Starting EasyDoc Appointment API...")

    mongo = MongoDB()
    mongo.connect()
    app.state.mongo = mongo

    if settings.TESTING:
        logger.info("Testing mode, skipping MongoDB ping")
    elif await mongo.ping():
        logger.info("Pinged your deployment. Successfully connected to MongoDB")
    else:
        logger.error("Could not reach MongoDB; requests will fail until it is available")

    logger.info("Application startup complete")
    try:
        yield
    finally:
        logger.info("Shutting down EasyDoc Appointment API...")
        mongo.close()

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    description="Users, doctors and appointments for a medical-appointment booking app",
    lifespan=lifespan
)

# Middleware setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom middleware for request logging and timing
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    # Log request
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Time: {process_time:.4f}s"
    )

    return response

# Exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "message": "invalid request body",
            "errors": jsonable_encoder(exc.errors())
        }
    )

@app.exception_handler(PyMongoError)
async def database_error_handler(request: Request, exc: PyMongoError):
    logger.error(f"Database error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "database error"}
    )

# Include routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(doctors_router)
app.include_router(appointments_router)

# Root endpoint
@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Server Running.........."

# Health check endpoint
@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint, including MongoDB reachability."""
    mongo = getattr(request.app.state, "mongo", None)
    database_ok = mongo is not None and await mongo.ping()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "connected" if database_ok else "unreachable",
        "version": settings.VERSION,
        "timestamp": time.time()
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
