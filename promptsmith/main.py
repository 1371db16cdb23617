"""
MAIN APPLICATION - FastAPI app initialization and configuration

This is the entry point for the PromptSmith application.
It sets up:
1. FastAPI app with metadata and documentation
2. CORS, rate limiting and request logging middleware
3. Route registration for all API endpoints
4. Health check endpoint

The app provides a REST API for prompt quality analysis, optimization,
framework-based prompt construction and language-aware generation.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import uuid
from collections import defaultdict
from promptsmith.config import RATE_LIMIT_REQUESTS, RATE_LIMIT_WINDOW
from promptsmith.routes import analyze, optimize, frameworks, generate
from promptsmith.utils import get_logger

logger = get_logger(__name__)

VERSION = "0.1.0"

# STEP 1: Create FastAPI application with metadata
app = FastAPI(
    title="PromptSmith",
    version=VERSION,
    docs_url="/swagger",     # Interactive Swagger UI for API exploration
    redoc_url="/docs",       # Cleaner ReDoc documentation
    swagger_ui_parameters={
        "defaultModelsExpandDepth": -1,
        "defaultModelExpandDepth": -1,
    },
)

# STEP 2: Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Simple in-process rate limiting, per client address
rate_limit_store = defaultdict(list)

def prune_rate_limit_store(now: float):
    """Forget clients whose most recent request is outside the window."""
    for client_ip, times in list(rate_limit_store.items()):
        if not times or now - times[-1] >= RATE_LIMIT_WINDOW:
            del rate_limit_store[client_ip]

@app.middleware("http")
async def rate_limit_middleware(request: Request, call_next):
    client_ip = request.client.host if request.client else "unknown"
    now = time.time()

    prune_rate_limit_store(now)

    # Clean old requests
    recent = [
        req_time for req_time in rate_limit_store.get(client_ip, ())
        if now - req_time < RATE_LIMIT_WINDOW
    ]

    if len(recent) >= RATE_LIMIT_REQUESTS:
        logger.warning(f"Rate limit exceeded for {client_ip}")
        return JSONResponse(status_code=429, content={"detail": "Rate limit exceeded"})

    recent.append(now)
    rate_limit_store[client_ip] = recent

    return await call_next(request)

# Request/Response logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = str(uuid.uuid4())[:8]
    start_time = time.time()

    logger.info(f"[{request_id}] {request.method} {request.url}")

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(f"[{request_id}] {response.status_code} - {process_time:.3f}s")

    return response

# STEP 3: Health check
@app.get("/health")
def health():
    """
    Simple health check endpoint.

    Returns: {"status": "ok"} if the service is running
    """
    return {"status": "ok"}

# STEP 4: Register all API route modules
app.include_router(analyze.router,    prefix="/analyze",    tags=["analyze"])     # Quality checker
app.include_router(optimize.router,   prefix="/optimize",   tags=["optimize"])    # Rewriter
app.include_router(frameworks.router, prefix="/frameworks", tags=["frameworks"])  # Template builders
app.include_router(generate.router,   prefix="/generate",   tags=["generate"])    # AI gateway
