import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import models
from config import settings
from database import engine, get_db
from errors import ResourceError, resource_error_handler
from logging_config import setup_logging
from routers import books, users

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up bookshelf...")
    if settings.CREATE_TABLES:
        models.Base.metadata.create_all(bind=engine)
    yield
    logger.info("Shutting down bookshelf...")

app = FastAPI(
    title="Bookshelf",
    description="Books and the users who collect them",
    version="1.0.0",
    lifespan=lifespan
)

app.add_exception_handler(ResourceError, resource_error_handler)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        duration_ms = (time.time() - start) * 1000
        logger.info(
            "%s %s -> %s (%.2f ms)",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
        )

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Health check endpoint
@app.get("/health", tags=["System"])
def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service unhealthy"
        )
    return {"status": "healthy", "service": "bookshelf", "database": "connected"}

app.include_router(books.router)
app.include_router(users.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
