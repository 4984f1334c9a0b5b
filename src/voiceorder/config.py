from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "127.0.0.1"
    port: int = 8001

    # Parsing
    default_language: str = "hi-IN"
    match_max_distance: int = 2  # strict: edit distance must be below this
    synonyms_file: str = ""  # optional JSON {key: [surface forms]} merged at startup

    # Catalog listing service
    catalog_url: str = ""
    catalog_timeout: float = 10.0

    @property
    def catalog_enabled(self) -> bool:
        return bool(self.catalog_url)

    # Text-to-speech webhook (spoken confirmation)
    tts_webhook_url: str = ""
    tts_max_retries: int = 3

    @property
    def tts_enabled(self) -> bool:
        return bool(self.tts_webhook_url)

    # Log
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
