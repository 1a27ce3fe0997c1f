import pytest

from backend.app.services.errors import ExplanationError, LLMQuotaError
from backend.app.services.explain import explain_query

from .fakes import FakeLLM


def test_returns_sections_in_order():
    llm = FakeLLM(structured={"explanations": [
        {"section": "SELECT company", "explanation": "Pick the company name"},
        {"section": "FROM unicorns", "explanation": ""},
        {"section": "LIMIT 5"},
    ]})
    parts = explain_query(llm, "five companies", "SELECT company FROM unicorns LIMIT 5")
    assert [p.section for p in parts] == ["SELECT company", "FROM unicorns", "LIMIT 5"]
    assert parts[1].explanation == ""
    assert parts[2].explanation == ""
    _, _, prompt = llm.calls[0]
    assert "SELECT company FROM unicorns LIMIT 5" in prompt


def test_no_fallback_even_on_quota():
    llm = FakeLLM(error=LLMQuotaError("insufficient_quota"))
    with pytest.raises(ExplanationError):
        explain_query(llm, "q", "SELECT 1")
