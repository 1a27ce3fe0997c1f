from contextlib import asynccontextmanager
from fastapi import FastAPI
from .core.config import settings
from .core.logging_config import configure_logging
from .db.session import engine
from .api.v1 import health, query

configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    engine.dispose()

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.include_router(health.router, prefix=settings.API_V1_PREFIX)
app.include_router(query.router,  prefix=settings.API_V1_PREFIX)
