import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.core.config import settings
from backend.api.routers.menu_match import router as menu_match_router, init_menu_match

import menu_match

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - load the catalog at startup."""
    if not init_menu_match():
        logger.warning("Starting without a catalog; /api/menu-match endpoints will return 503")

    yield  # Application runs here


app = FastAPI(title="Menu Match", version=menu_match.__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(menu_match_router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "version": menu_match.__version__}
