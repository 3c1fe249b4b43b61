# nlp_enrich/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"

    SERVICE_NAME: str = "nlp-enrich"
    LOG_LEVEL: str = "INFO"

    STOPWORDS_SOURCE: str = "file"  # "file" | "nltk"
    STOPWORDS_LANGUAGE: str = "english"
    STOPWORDS_DIR: str | None = None  # overrides the packaged word lists
    STOPWORDS_MIN_TOKEN_LEN: int = 1
    NLTK_AUTO_DOWNLOAD: bool = False

    BETTERSTACK_API_KEY: str | None = None  # PRODUCTION MODE ONLY
    BETTERSTACK_HOST: str | None = None  # PRODUCTION MODE ONLY

    OTEL_SERVICE_NAME: str | None = None
    OTEL_SERVICE_VERSION: str | None = None
    OTEL_CONSOLE_EXPORT: bool = False

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
    )

    @property
    def is_production(self) -> bool:
        return self.ENV.lower() == "production"


settings = Settings()
