import pytest
from langchain_core.language_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda

from backend.app.core.config import Settings
from backend.app.services.errors import LLMError, LLMQuotaError
from backend.app.services.provider import LLMClient, classify_error


class StatusError(Exception):
    def __init__(self, message, status_code):
        super().__init__(message)
        self.status_code = status_code


@pytest.mark.parametrize("exc", [
    StatusError("Incorrect API key provided", 401),
    StatusError("Payment required", 402),
    Exception("Error code: 429 - {'error': {'code': 'insufficient_quota'}}"),
    Exception("You exceeded your current quota, please check your plan and billing details"),
])
def test_quota_class_errors(exc):
    assert isinstance(classify_error(exc), LLMQuotaError)


@pytest.mark.parametrize("exc", [
    StatusError("Rate limit reached, retry in 20s", 429),
    StatusError("Internal server error", 500),
    ConnectionError("Connection refused"),
    ValueError("Invalid json output"),
])
def test_other_errors(exc):
    err = classify_error(exc)
    assert isinstance(err, LLMError)
    assert not isinstance(err, LLMQuotaError)


def test_complete_returns_text():
    llm = LLMClient(model=FakeListChatModel(responses=["SELECT 1"]))
    assert llm.complete("system", "prompt") == "SELECT 1"


def test_complete_classifies_failures():
    def boom(_):
        raise StatusError("billing hard limit", 400)

    llm = LLMClient(model=RunnableLambda(boom))
    with pytest.raises(LLMQuotaError, match="billing"):
        llm.complete("system", "prompt")


def test_missing_openai_key_is_quota_class():
    llm = LLMClient(Settings(LLM_PROVIDER="openai", OPENAI_API_KEY=""))
    with pytest.raises(LLMQuotaError, match="OPENAI_API_KEY"):
        llm.complete("system", "prompt")


def test_unknown_provider():
    llm = LLMClient(Settings(LLM_PROVIDER="carrier-pigeon"))
    with pytest.raises(LLMError, match="carrier-pigeon"):
        llm.complete("system", "prompt")
