import logging
from typing import Type, TypeVar

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.output_parsers import StrOutputParser
from pydantic import BaseModel

from ..core.config import Settings, settings
from .errors import LLMError, LLMQuotaError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

QUOTA_STATUS_CODES = {401, 402, 403}
QUOTA_MARKERS = ("insufficient_quota", "quota", "billing", "api key", "api_key")


def classify_error(exc: Exception) -> LLMError:
    """Map a provider exception onto LLMQuotaError or LLMError."""
    status = getattr(exc, "status_code", None)
    if status is None:
        status = getattr(getattr(exc, "response", None), "status_code", None)
    message = str(exc)
    lowered = message.lower()
    if status in QUOTA_STATUS_CODES or any(m in lowered for m in QUOTA_MARKERS):
        return LLMQuotaError(message)
    return LLMError(message)


class LLMClient:
    """Free-text and structured completions over a LangChain chat model."""

    def __init__(self, config: Settings = settings, model: BaseChatModel | None = None):
        self.config = config
        self._model = model

    @property
    def model(self) -> BaseChatModel:
        if self._model is None:
            self._model = self._build_model()
        return self._model

    def _build_model(self) -> BaseChatModel:
        provider = self.config.LLM_PROVIDER.lower()
        logger.info("Using %s chat model", provider)
        if provider == "openai":
            if not self.config.OPENAI_API_KEY:
                raise LLMQuotaError("OpenAI API key is not configured. Set OPENAI_API_KEY in your .env file.")
            from langchain_openai import ChatOpenAI

            return ChatOpenAI(
                model=self.config.OPENAI_MODEL,
                api_key=self.config.OPENAI_API_KEY,
                temperature=self.config.LLM_TEMPERATURE,
                timeout=self.config.LLM_TIMEOUT,
                max_retries=0,  # fail fast so quota errors reach the fallbacks
            )
        if provider == "ollama":
            from langchain_ollama import ChatOllama

            return ChatOllama(
                model=self.config.OLLAMA_MODEL,
                base_url=self.config.OLLAMA_HOST,
                temperature=self.config.LLM_TEMPERATURE,
            )
        raise LLMError(f"Unknown LLM_PROVIDER: {self.config.LLM_PROVIDER}")

    def complete(self, system: str, prompt: str) -> str:
        messages = [SystemMessage(content=system), HumanMessage(content=prompt)]
        try:
            return (self.model | StrOutputParser()).invoke(messages)
        except LLMError:
            raise
        except Exception as e:
            raise classify_error(e) from e

    def complete_structured(self, system: str, prompt: str, schema: Type[T]) -> T:
        messages = [SystemMessage(content=system), HumanMessage(content=prompt)]
        try:
            result = self.model.with_structured_output(schema).invoke(messages)
        except LLMError:
            raise
        except Exception as e:
            raise classify_error(e) from e
        if result is None:
            raise LLMError("Model returned no structured output")
        return result


def get_llm() -> LLMClient:
    return LLMClient(settings)
