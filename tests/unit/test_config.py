"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pydantic
import pytest

from core.config import _reset_config, get_config


@pytest.fixture(autouse=True)
def _clear_config_cache():
    _reset_config()
    yield
    _reset_config()


def test_get_config_defaults():
    """Test that get_config provides sensible defaults."""
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        assert config.aws_region == "us-east-1"
        assert config.db_host == "localhost"
        assert config.db_port == 5432
        assert config.storage_key == "enviroai-storage"
        assert config.nominatim_url == "https://nominatim.openstreetmap.org"
        assert config.geoapify_api_key == ""
        assert config.environment == "local"
        assert config.db_secret_arn is None


def test_get_config_reads_api_keys():
    with patch.dict(os.environ, {"GEOAPIFY_API_KEY": "geo-key", "AI_GATEWAY_API_KEY": "ai-key"}, clear=True):
        config = get_config()
        assert config.geoapify_api_key == "geo-key"
        assert config.ai_gateway_api_key == "ai-key"


def test_db_port_string_coercion():
    with patch.dict(os.environ, {"DB_PORT": "5433"}, clear=False):
        config = get_config()
        assert config.db_port == 5433
        assert isinstance(config.db_port, int)


def test_http_timeout_string_coercion():
    with patch.dict(os.environ, {"HTTP_TIMEOUT_SECONDS": "7.5"}, clear=True):
        assert get_config().http_timeout_seconds == 7.5


def test_get_config_is_cached():
    with patch.dict(os.environ, {}, clear=True):
        assert get_config() is get_config()


def test_clerk_secret_from_env():
    with patch.dict(os.environ, {"CLERK_SECRET_KEY": "sk_test_abc"}, clear=True):
        assert get_config().clerk_secret_key == "sk_test_abc"


def test_clerk_secret_from_secrets_manager():
    with (
        patch.dict(os.environ, {"CLERK_SECRET_ARN": "arn:aws:secretsmanager:us-east-1:1:secret:clerk"}, clear=True),
        patch("core.config.boto3") as mock_boto3,
    ):
        mock_boto3.client.return_value.get_secret_value.return_value = {"SecretString": "sk_live_xyz"}
        assert get_config().clerk_secret_key == "sk_live_xyz"
        mock_boto3.client.assert_called_once_with("secretsmanager")


def test_config_is_immutable():
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        with pytest.raises(pydantic.ValidationError):
            config.aws_region = "eu-west-1"  # type: ignore[misc]
