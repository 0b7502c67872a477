"""Main FastAPI application with modularized routes."""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from logging_setup import setup_console_logging
from temple_api.config import STATIC_DIR
from temple_api.dependencies import get_quiz_engine
from temple_api.routes import bookings, content, quizzes, site

setup_console_logging()

app = FastAPI(title="Temple Site API")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Startup events
@app.on_event("startup")
def startup_events() -> None:
    """Build the quiz catalog up front so a bad bank fails at boot."""
    get_quiz_engine()


# Root endpoint
@app.get("/")
def index() -> FileResponse:
    """Serve frontend index.html."""
    index_path = STATIC_DIR / "index.html"
    if not index_path.exists():
        raise HTTPException(status_code=404, detail="Frontend not found")
    return FileResponse(index_path)


# Mount static files
if STATIC_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Include routers
app.include_router(quizzes.router)
app.include_router(bookings.router)
app.include_router(content.router)
app.include_router(site.router)
