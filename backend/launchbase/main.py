import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .database import init_db
from .routes.analyses import router as analyses_router
from .routes.auth import router as auth_router
from .routes.checklist import router as checklist_router
from .routes.connections import router as connections_router
from .routes.content import router as content_router
from .routes.dashboard import router as dashboard_router
from .routes.integrations import router as integrations_router
from .routes.notifications import router as notifications_router
from .routes.profile import router as profile_router
from .routes.suggestions import router as suggestions_router
from .routes.suggestions import strategy_router


# Load environment variables from .env file
load_dotenv()

_DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173"


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    init_db()
    print("Starting Launchbase API")
    print(f"   OpenAI Key:  {' Configured' if os.getenv('OPENAI_API_KEY') else ' Not set (AI features return 502)'}")
    print(f"   Tavily Key:  {' Configured' if os.getenv('TAVILY_API_KEY') else ' Not set (analysis runs without web grounding)'}")
    print("   Ready to launch MVPs!")

    yield

    print("Shutting down Launchbase API")


app = FastAPI(
    title="Launchbase — AI go-to-market assistant for MVPs",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS).split(",")
        if origin.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],  # Allow all HTTP methods
    allow_headers=["*"],  # Allow all headers
)

app.include_router(auth_router)
app.include_router(connections_router)
app.include_router(analyses_router)
app.include_router(integrations_router)
app.include_router(content_router)
app.include_router(strategy_router)
app.include_router(suggestions_router)
app.include_router(checklist_router)
app.include_router(notifications_router)
app.include_router(profile_router)
app.include_router(dashboard_router)


@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Launchbase",
        "version": __version__,
        "description": "Connect your MVP and get AI-powered go-to-market analysis",
        "docs": "/docs",
        "endpoints": {
            "connect": "POST /connections/ - Connect an MVP",
            "analysis": "GET /analyses/latest - Latest AI analysis",
            "dashboard": "GET /dashboard/ - Dashboard summary",
            "health": "GET /health - Service health check"
        }
    }


@app.get(
    "/health",
    summary="Global Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "launchbase",
        "version": __version__
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "detail": str(exc) if os.getenv("DEBUG", "false").lower() == "true" else "An unexpected error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "launchbase.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("DEBUG", "true").lower() == "true",
    )
