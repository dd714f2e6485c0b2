from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

_cached_clerk_secret: str | None = None


def _resolve_clerk_secret() -> str:
    """Fetch Clerk secret from Secrets Manager at runtime, with caching."""
    global _cached_clerk_secret
    if _cached_clerk_secret is not None:
        return _cached_clerk_secret

    # Local dev: use env var directly
    direct = environ.get("CLERK_SECRET_KEY", "")
    if direct:
        _cached_clerk_secret = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get("CLERK_SECRET_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_clerk_secret = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_clerk_secret


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    db_host: str
    db_port: int
    db_name: str
    db_user: str
    db_password: str
    db_secret_arn: str | None = None
    store_dir: str
    storage_key: str
    nominatim_url: str
    open_meteo_url: str
    geoapify_url: str
    geoapify_api_key: str = ""
    ai_gateway_url: str
    ai_gateway_api_key: str = ""
    ai_model: str
    http_timeout_seconds: float
    user_agent: str
    clerk_secret_key: str = ""
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config: for testing only."""
    global _cached_config, _cached_clerk_secret
    _cached_config = None
    _cached_clerk_secret = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        db_host=environ.get("DB_HOST", "localhost"),
        db_port=int(environ.get("DB_PORT", "5432")),
        db_name=environ.get("DB_NAME", "enviroai"),
        db_user=environ.get("DB_USER", "enviroai"),
        db_password=environ.get("DB_PASSWORD", "localdev"),
        db_secret_arn=environ.get("DB_SECRET_ARN"),
        store_dir=environ.get("STORE_DIR", ".enviroai"),
        storage_key=environ.get("STORAGE_KEY", "enviroai-storage"),
        nominatim_url=environ.get("NOMINATIM_URL", "https://nominatim.openstreetmap.org"),
        open_meteo_url=environ.get("OPEN_METEO_URL", "https://api.open-meteo.com"),
        geoapify_url=environ.get("GEOAPIFY_URL", "https://api.geoapify.com"),
        geoapify_api_key=environ.get("GEOAPIFY_API_KEY", ""),
        ai_gateway_url=environ.get("AI_GATEWAY_URL", "https://ai.gateway.lovable.dev/v1/chat/completions"),
        ai_gateway_api_key=environ.get("AI_GATEWAY_API_KEY", ""),
        ai_model=environ.get("AI_MODEL", "google/gemini-2.5-flash"),
        http_timeout_seconds=float(environ.get("HTTP_TIMEOUT_SECONDS", "30")),
        user_agent=environ.get("USER_AGENT", "EnviroAI/1.0 (https://enviroai.app)"),
        clerk_secret_key=_resolve_clerk_secret(),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
