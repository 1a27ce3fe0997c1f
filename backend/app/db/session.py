from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel, create_engine
from ..core.config import settings

# one connection per executor call, closed on release
engine = create_engine(settings.DATABASE_URL, echo=False, poolclass=NullPool)

def init_db(bind: Engine = engine) -> None:
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(bind)

def get_engine() -> Engine:
    return engine
