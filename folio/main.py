import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from folio.routers import posts, styles
from folio.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CONTENT_ROOT.is_dir():
        logger.info(f"Serving blog content from {settings.CONTENT_ROOT}")
    else:
        logger.warning(f"Content root {settings.CONTENT_ROOT} does not exist")
    yield


app = FastAPI(
    title="folio API",
    description="Portfolio blog content pipeline",
    lifespan=lifespan,
)

app.include_router(posts.router)
app.include_router(styles.router)


@app.get("/")
async def root():
    return {"message": "folio API is running"}
