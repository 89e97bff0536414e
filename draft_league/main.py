import logging

from draft_league.api.api_v1.api import api_router
from draft_league.core.config import settings
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Only the app's own loggers; handlers come from the server's log config
logging.getLogger("draft_league").setLevel(settings.LOG_LEVEL)
logging.getLogger("realsports_sdk").setLevel(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    redirect_slashes=False,  # Prevent 307 redirects that break CORS
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/")
def read_root():
    return {"message": f"Welcome to the {settings.PROJECT_NAME} API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
