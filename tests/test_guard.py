import pytest

from backend.app.services.errors import GuardError
from backend.app.services.guard import FORBIDDEN, validate
from backend.app.services.nl2sql import CandidateQuery


@pytest.mark.parametrize("sql", [
    "SELECT company FROM unicorns",
    "  select company, valuation from unicorns limit 5;  ",
    "SeLeCt COUNT(*) FROM unicorns;;",
])
def test_accepts_select(sql):
    validated = validate(CandidateQuery(sql))
    assert validated.sql == sql


def test_keeps_text_and_source_unchanged():
    candidate = CandidateQuery("  SELECT Company FROM unicorns;\n", source="fallback")
    validated = validate(candidate)
    assert validated.sql == candidate.sql
    assert validated.source == "fallback"


@pytest.mark.parametrize("sql", [
    "WITH x AS (SELECT 1) SELECT * FROM x",
    "DELETE FROM unicorns",
    "show tables",
    "",
    "   ;",
])
def test_rejects_non_select(sql):
    with pytest.raises(GuardError, match="Only SELECT"):
        validate(CandidateQuery(sql))


@pytest.mark.parametrize("word", FORBIDDEN)
def test_rejects_every_forbidden_word(word):
    with pytest.raises(GuardError, match="forbidden"):
        validate(CandidateQuery(f"SELECT company FROM unicorns; {word.upper()} TABLE unicorns"))


def test_rejects_forbidden_word_inside_identifier():
    # created_at trips "create"; accepted trade-off
    with pytest.raises(GuardError):
        validate(CandidateQuery("SELECT created_at FROM unicorns"))


def test_allows_words_that_merely_resemble_forbidden_ones():
    validated = validate(CandidateQuery("SELECT country, city, date_joined FROM unicorns"))
    assert validated.sql.startswith("SELECT")


@pytest.mark.parametrize("sql", [
    "SELECT 1; SELECT pg_sleep(60)",
    "SELECT company FROM unicorns;\nSELECT city FROM unicorns;",
])
def test_rejects_multiple_statements(sql):
    with pytest.raises(GuardError, match="single statement"):
        validate(CandidateQuery(sql))
