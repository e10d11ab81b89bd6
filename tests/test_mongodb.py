"""Tests for the MongoDB client factory."""

from unittest.mock import MagicMock, patch

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from userapi.core.config import Settings
from userapi.infrastructure.mongodb import check_connection, create_client


def test_create_client_uses_settings_uri() -> None:
    settings = Settings(_env_file=None, mongodb_host="db", mongodb_port=27018)
    with patch("userapi.infrastructure.mongodb.MongoClient") as client_cls:
        create_client(settings)
    args, kwargs = client_cls.call_args
    assert args == ("mongodb://db:27018",)
    assert kwargs["serverSelectionTimeoutMS"] > 0


def test_check_connection_pings() -> None:
    client = MagicMock()
    check_connection(client)
    client.admin.command.assert_called_once_with("ping")


def test_check_connection_failure_is_connection_error() -> None:
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")
    with pytest.raises(ConnectionError, match="no servers"):
        check_connection(client)
