"""Application configuration with comprehensive validation."""
from typing import Optional, Literal, List
from functools import lru_cache
from pydantic import Field, field_validator, model_validator, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with production-grade validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Phi Emergence Service"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Emergence display
    BAR_WIDTH: int = Field(default=10, ge=5, le=50)
    EMERGENCE_HISTORY_SIZE: int = Field(default=50, ge=1, le=1000)

    # Integration indicator: distinct sources needed for a full 100
    INTEGRATION_TARGET_SOURCES: int = Field(default=5, ge=1, le=100)

    # Indicator Weights
    W_PATTERN_RECOGNITION: float = Field(default=0.20, ge=0.0, le=1.0)
    W_SELF_CORRECTION: float = Field(default=0.20, ge=0.0, le=1.0)
    W_META_COGNITION: float = Field(default=0.20, ge=0.0, le=1.0)
    W_GOAL_PERSISTENCE: float = Field(default=0.20, ge=0.0, le=1.0)
    W_INTEGRATION: float = Field(default=0.20, ge=0.0, le=1.0)

    # LLM Providers
    LLM_PROVIDER: Literal["auto", "passthrough", "ollama", "openai"] = "auto"
    LLM_TIMEOUT_SECONDS: float = Field(default=60.0, ge=1.0, le=600.0)
    LLM_TEMPERATURE: float = Field(default=0.7, ge=0.0, le=2.0)
    LLM_MAX_TOKENS: int = Field(default=1000, ge=1, le=32000)
    OLLAMA_HOST: str = "http://localhost:11434"
    OLLAMA_MODEL: str = "llama3.2"
    OPENAI_API_KEY: Optional[SecretStr] = None
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_MODEL: str = "gpt-4o-mini"

    @field_validator("OPENAI_API_KEY")
    @classmethod
    def validate_openai_key(cls, v: Optional[SecretStr]) -> Optional[SecretStr]:
        if v is not None and not v.get_secret_value().startswith("sk-"):
            raise ValueError("Invalid OpenAI API key format")
        return v

    @model_validator(mode="after")
    def validate_indicator_weights(self):
        """Validate indicator weights sum to 1.0."""
        total = sum(self.indicator_weights)
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"Indicator weights must sum to 1.0, got {total}")
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run with debug or an unreachable LLM default."""
        if self.APP_ENV == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if self.LLM_PROVIDER == "openai" and not self.OPENAI_API_KEY:
                raise ValueError("OPENAI_API_KEY required when LLM_PROVIDER=openai in production")
        return self

    @property
    def indicator_weights(self) -> List[float]:
        """Get indicator weights as list (pattern, correction, meta, goal, integration)."""
        return [
            self.W_PATTERN_RECOGNITION, self.W_SELF_CORRECTION, self.W_META_COGNITION,
            self.W_GOAL_PERSISTENCE, self.W_INTEGRATION
        ]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
