# main.py
# FastAPI application entry point for appshelf

from fastapi import FastAPI

from .routes import api_appinfo_router, library_router

# Create FastAPI app
app = FastAPI(
    title="appshelf API",
    description="Read-only API over Steam's binary appinfo.vdf cache",
    version="1.0.0",
)

# Include routers
app.include_router(api_appinfo_router)
app.include_router(library_router)
