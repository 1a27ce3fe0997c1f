from backend.app.db.models import Unicorn
from backend.app.services.schema_registry import COLUMNS, SCHEMA_DDL, TABLE_NAME


def test_registry_matches_table_model():
    assert Unicorn.__tablename__ == TABLE_NAME
    assert [c.name for c in COLUMNS] == list(Unicorn.__table__.columns.keys())


def test_ddl_lists_constraints():
    assert SCHEMA_DDL.startswith("unicorns (\n  id SERIAL PRIMARY KEY,")
    assert "company VARCHAR(255) NOT NULL UNIQUE" in SCHEMA_DDL
    assert "date_joined DATE,\n" in SCHEMA_DDL
