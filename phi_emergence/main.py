from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# IMPORT ROUTERS
from phi_emergence.routers.health import router as health_router
from phi_emergence.routers.emergence import router as emergence_router
from phi_emergence.routers.llm import router as llm_router
load_dotenv()

from phi_emergence.config import get_settings
from phi_emergence.core.dependencies import close_llm_provider
from phi_emergence.logging_config import configure_logging

import structlog

configure_logging()
logger = structlog.get_logger(__name__)


# SWAGGER UI — tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Emergence"},
    {"name": "LLM"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=get_settings().APP_NAME,
    version=get_settings().APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)     # Health
app.include_router(emergence_router)  # Emergence
app.include_router(llm_router)        # LLM


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": get_settings().APP_NAME,
        "version": get_settings().APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# STARTUP EVENT
@app.on_event("startup")
async def startup_event():
    settings = get_settings()
    logger.info(
        "service_starting",
        app=settings.APP_NAME,
        env=settings.APP_ENV,
        llm_provider=settings.LLM_PROVIDER,
    )


# SHUTDOWN EVENT
@app.on_event("shutdown")
async def shutdown_event():
    close_llm_provider()
    logger.info("service_stopping", app=get_settings().APP_NAME)


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "phi_emergence.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
