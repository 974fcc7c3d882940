from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from planner.core.cache import RedisCache
from planner.core.config import settings
from planner.core.init_db import init_db, close_db
from planner.core.redis_lifecycle import init_cache, close_cache, get_cache
from planner.routes import api_router

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.PROJECT_DESCRIPTION,
    openapi_url="/openapi.json"
)

# The web app is the only browser client
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.WEB_BASE_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include all API routes
app.include_router(api_router)

@app.get("/")
async def root():
    return {"message": "Welcome to Planner API"}

@app.get("/health")
async def health_check(cache: RedisCache = Depends(get_cache)):
    return {"status": "healthy", "cache": "up" if await cache.ping() else "down"}

@app.on_event("startup")
async def startup_event():
    await init_db()
    await init_cache()

@app.on_event("shutdown")
async def shutdown_event():
    await close_cache()
    await close_db()
