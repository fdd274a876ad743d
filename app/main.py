from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.categories.router import router as categories_router
from app.config import settings
from app.database import check_health, close_database, init_database
from app.dependencies import StoreDep
from app.events.router import router as events_router
from app.exception_handlers import register_exception_handlers
from app.logging_config import setup_logging
from app.timeline.router import router as timeline_router
from app.users.router import router as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await init_database()
    yield
    await close_database()


app = FastAPI(
    title="Life Timeline",
    description="Personal life timeline tracker",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(users_router, prefix="/api/user", tags=["user"])
app.include_router(events_router, prefix="/api/events", tags=["events"])
app.include_router(categories_router, prefix="/api/categories", tags=["categories"])
app.include_router(timeline_router, prefix="/api/timeline", tags=["timeline"])


@app.get("/api/health")
async def health(store: StoreDep):
    await check_health(store)
    return {"status": "healthy"}


if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
