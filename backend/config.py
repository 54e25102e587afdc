import json

from pydantic_settings import BaseSettings


def parse_origins(raw: str) -> list[str]:
    """Parse an origins value given as comma-separated string or JSON list."""
    raw = raw.strip()
    if not raw:
        return []
    if raw.startswith("["):
        return [str(o) for o in json.loads(raw)]
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    review_engine: str = "heuristic"  # "heuristic" | "gemini"

    # Length gate, measured on normalized text (both bounds inclusive)
    min_text_chars: int = 200
    max_text_chars: int = 25000
    max_upload_size_mb: int = 5

    # Throttle (slowapi); storage can point at redis:// for shared limits
    rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True
    rate_limit_storage_uri: str = "memory://"

    # CORS_ORIGINS accepts "a,b" or '["a", "b"]'
    cors_origins: str = "http://localhost:5173,http://localhost:3000,http://localhost:8888"
    mentor_name: str = "Davis Booth"
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def cors_origin_list(self) -> list[str]:
        return parse_origins(self.cors_origins)


settings = Settings()
