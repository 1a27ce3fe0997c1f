from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Unicorn Insights API"
    API_V1_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # LLM providers
    LLM_PROVIDER: str = "ollama"  # or "openai"
    OLLAMA_HOST: str = "http://ollama:11434"
    OLLAMA_MODEL: str = "llama3:8b"
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-3.5-turbo"
    LLM_TEMPERATURE: float = 0.0
    LLM_TIMEOUT: float = 120

    # DB
    DATABASE_URL: str = "sqlite:///./data/unicorns.db"
    UNICORNS_CSV: str = "./data/unicorns.csv"

    class Config:
        env_file = ".env"

settings = Settings()
