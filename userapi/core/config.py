"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from functools import lru_cache
from typing import Literal, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        listen_type: ``"port"`` for TCP, ``"sock"`` for a Unix-domain socket.
        listen_bind_ip: TCP bind address.
        listen_port: TCP port.
        socket_path: Filesystem path of the Unix-domain socket.
        create_timeout_seconds: Deadline for a single user creation.
        request_timeout_seconds: Deadline for every other storage call.
        legacy_error_bodies: Send the not-found envelope for every 400
            response, as the first release of the service did.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "User API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    listen_type: Literal["port", "sock"] = "port"
    listen_bind_ip: str = "127.0.0.1"
    listen_port: int = 8080
    socket_path: str = "app.sock"

    mongodb_host: str = "localhost"
    mongodb_port: int = 27017
    mongodb_username: Optional[str] = None
    mongodb_password: Optional[str] = None
    mongodb_database: str = "user-service"
    mongodb_auth_db: str = "admin"
    mongodb_collection: str = "users"

    create_timeout_seconds: float = 2.0
    request_timeout_seconds: float = 5.0
    legacy_error_bodies: bool = False

    def get_mongodb_uri(self) -> str:
        """Return the MongoDB connection URI.

        Credentials and ``authSource`` are only included when a username
        is configured.
        """
        if self.mongodb_username:
            credentials = quote_plus(self.mongodb_username)
            if self.mongodb_password:
                credentials += ":" + quote_plus(self.mongodb_password)
            return (
                f"mongodb://{credentials}@{self.mongodb_host}:{self.mongodb_port}"
                f"/?authSource={quote_plus(self.mongodb_auth_db)}"
            )
        return f"mongodb://{self.mongodb_host}:{self.mongodb_port}"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()

