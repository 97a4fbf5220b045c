"""
Code Diff Viewer Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers import config, diff, sessions
from services.config_manager import ConfigManager
from services.session_store import get_session_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Code Diff Viewer Backend...")
    config_manager = ConfigManager.get_instance()
    print(f"[Backend] ConfigManager initialized ({config_manager.config_file})")
    print(
        f"[Backend] Default algorithm: {config_manager.get_algorithm()}, "
        f"theme: {config_manager.get_theme()}"
    )

    yield
    # Shutdown: drop in-memory sessions
    get_session_store().clear()
    print("[Backend] Shutting down Code Diff Viewer Backend...")


app = FastAPI(
    title="Code Diff Viewer Backend",
    description="Line-level diff engine with side-by-side rendering",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for the browser front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
app.include_router(sessions.router, prefix="/api/sessions", tags=["sessions"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "code-diff-viewer-backend"}


def run():
    """Run the server on the configured host/port"""
    import uvicorn

    server = ConfigManager.get_instance().get_config().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=int(server.get("port", 8000)))


if __name__ == "__main__":
    run()
