from unittest.mock import MagicMock, patch

import pytest

from core.services.migration import _load_credentials_from_secret, run_migrations
from handlers.migrate import handler


@patch("core.services.migration.command")
@patch("core.services.migration._load_credentials_from_secret")
def test_run_migrations_success(mock_creds, mock_command):
    with patch.dict("os.environ", {"DB_SECRET_ARN": ""}):
        with patch("core.services.migration.Config"):
            result = run_migrations()
            assert result["status"] == "success"
            mock_command.upgrade.assert_called_once()
            mock_creds.assert_not_called()


@patch("core.services.migration.command")
@patch("core.services.migration._load_credentials_from_secret")
def test_run_migrations_loads_secret(mock_creds, mock_command):
    with patch.dict("os.environ", {"DB_SECRET_ARN": "arn:db"}):
        with patch("core.services.migration.Config"):
            run_migrations()
            mock_creds.assert_called_once_with("arn:db")


@patch("core.services.migration.command")
def test_run_migrations_raises_on_failure(mock_command):
    mock_command.upgrade.side_effect = Exception("connection refused")
    with patch.dict("os.environ", {"DB_SECRET_ARN": ""}):
        with patch("core.services.migration.Config"):
            with pytest.raises(Exception, match="connection refused"):
                run_migrations()


def test_load_credentials_sets_db_env():
    secret = '{"username": "app", "password": "pw", "host": "db.internal", "port": 6543, "dbname": "trips"}'
    with patch("core.services.migration.boto3") as mock_boto3, patch.dict("os.environ", {}, clear=True):
        mock_boto3.client.return_value.get_secret_value.return_value = {"SecretString": secret}

        _load_credentials_from_secret("arn:db")

        import os

        assert os.environ["DB_USER"] == "app"
        assert os.environ["DB_HOST"] == "db.internal"
        assert os.environ["DB_PORT"] == "6543"
        assert os.environ["DB_NAME"] == "trips"


def test_migrate_handler_returns_output():
    with patch("handlers.migrate.run_migrations", return_value={"status": "success", "output": "done"}):
        assert handler({}, MagicMock()) == {"statusCode": 200, "body": "done"}
