from pathlib import Path
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PATH = Path(__file__).resolve().parents[2] / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_PATH, env_file_encoding="utf-8", extra="ignore")

    # App
    env: str = "dev"
    service_name: str = "storefront-edit"

    # Marketplace REST API
    api_base_url: str = "http://localhost:8080/api"
    http_timeout_seconds: float = 20.0
    max_response_body_chars: int = 20_000

    # Session token (login flow stores it; passed through here for scripts/tests)
    api_token: SecretStr = SecretStr("")

    # Telemetry
    telemetry_enabled: bool = False
    otlp_endpoint: str = "http://localhost:4318"  # Jaeger OTLP HTTP


settings = Settings()
