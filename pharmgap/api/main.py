"""
PharmGap FastAPI main
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pharmgap import __version__
from pharmgap.api.routes import router
from pharmgap.config import settings
from pharmgap.logging_setup import configure_logging

configure_logging()

app = FastAPI(
    title="PharmGap",
    description="Pharmacy market-gap analysis per kelurahan",
    version=__version__,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # dashboard is served from a different origin
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Health check"""
    return {
        "name": "PharmGap",
        "status": "running",
        "version": __version__,
    }


@app.get("/health")
async def health():
    """Detailed health check"""
    return {
        "status": "healthy",
        "env": settings.ENV,
        "data_dir": settings.DATA_DIR,
    }
