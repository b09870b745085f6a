from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import enforcement, health
from .config import settings
from .logging_config import setup_logging
from .middleware import RequestLoggingMiddleware

setup_logging()

# Create FastAPI app
app = FastAPI(
    title="UncensoredL2 API",
    description="Prepares L1 enforcement transactions for L2 token swaps",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(enforcement.router, tags=["Enforcement"])


@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "name": "UncensoredL2 API",
        "version": "0.1.0",
        "description": "Prepares L1 enforcement transactions for L2 token swaps",
        "docs": "/docs",
        "health": "/healthz"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "uncensored_l2.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )
