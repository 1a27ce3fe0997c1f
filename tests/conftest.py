from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, create_engine

from backend.app.db.models import Unicorn
from backend.app.db.session import get_engine, init_db
from backend.app.main import app
from backend.app.services.provider import get_llm

from .fakes import FakeLLM


UNICORNS = [
    dict(company="ByteDance", valuation=Decimal("180000"), date_joined=date(2017, 4, 7),
         country="China", city="Beijing", industry="Artificial intelligence",
         select_investors="Sequoia Capital China, SIG Asia Investments"),
    dict(company="SpaceX", valuation=Decimal("100000"), date_joined=date(2012, 12, 1),
         country="United States", city="Hawthorne", industry="Other",
         select_investors="Founders Fund, Draper Fisher Jurvetson"),
    dict(company="Stripe", valuation=Decimal("95000"), date_joined=date(2014, 1, 23),
         country="United States", city="San Francisco", industry="Fintech",
         select_investors="Khosla Ventures, LowercaseCapital"),
]


@pytest.fixture
def bare_engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def empty_engine(bare_engine):
    init_db(bare_engine)
    return bare_engine


@pytest.fixture
def seeded_engine(empty_engine):
    with Session(empty_engine) as session:
        session.add_all([Unicorn(**u) for u in UNICORNS])
        session.commit()
    return empty_engine


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def client(seeded_engine, fake_llm):
    app.dependency_overrides[get_engine] = lambda: seeded_engine
    app.dependency_overrides[get_llm] = lambda: fake_llm
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
