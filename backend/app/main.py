"""
LoveFold API
Provides REST endpoints for name encoding, ESMFold folding and structure summaries.

Run: uvicorn app.main:app --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

import lovefold
from lovefold.config import CORS_ORIGINS, configure_logging
from app.routers import fold

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="LoveFold API",
    description="Turn two names into a protein and describe its fold",
    version=lovefold.__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(fold.router)


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Liveness probe"""
    return HealthResponse(status="ok", version=lovefold.__version__)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
