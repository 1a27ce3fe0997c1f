from sqlalchemy.pool import NullPool

from backend.app.db.session import engine, get_engine


def test_engine_does_not_pool_connections():
    assert get_engine() is engine
    assert isinstance(engine.pool, NullPool)
