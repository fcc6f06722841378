"""
Configuration Management
Environment-based configuration for database and application settings
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)


STORAGE_BACKENDS = ("postgres", "memory")


class DatabaseConfig(BaseSettings):
    """Database Configuration - uses service-specific credentials"""
    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    # Connection settings
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "product"
    db_service_user: str = "product_service"
    db_service_password: str = "product_service_secure_pass_change_me"

    # Pool settings
    db_pool_min_size: int = 5
    db_pool_max_size: int = 20
    db_command_timeout: int = 30

    @field_validator('postgres_port')
    @classmethod
    def validate_postgres_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError('Postgres port must be between 1 and 65535')
        return v

    @field_validator('db_pool_max_size')
    @classmethod
    def validate_pool_size(cls, v, info):
        min_size = info.data.get('db_pool_min_size', 1)
        if v < min_size:
            raise ValueError('Pool max size must not be smaller than min size')
        return v

    def pool_kwargs(self) -> dict:
        """Keyword arguments for asyncpg.create_pool"""
        return {
            'host': self.postgres_host,
            'port': self.postgres_port,
            'database': self.postgres_db,
            'user': self.db_service_user,
            'password': self.db_service_password,
            'min_size': self.db_pool_min_size,
            'max_size': self.db_pool_max_size,
            'command_timeout': self.db_command_timeout
        }

    def log_config(self):
        """Log configuration (without sensitive data)"""
        logger.info(
            "Database configuration",
            host=self.postgres_host,
            port=self.postgres_port,
            database=self.postgres_db,
            user=self.db_service_user,
            pool_min=self.db_pool_min_size,
            pool_max=self.db_pool_max_size
        )


class AppConfig(BaseSettings):
    """Application Configuration"""
    model_config = SettingsConfigDict(env_prefix="APP_", case_sensitive=False)

    # Service info
    service_name: str = "product-service"
    service_version: str = "1.0.0"
    debug: bool = False

    # API settings
    api_prefix: str = "/api/v1"
    docs_url: str = "/docs"

    # Storage backend: "postgres" or "memory"
    storage_backend: str = "postgres"

    # Server settings
    log_level: str = "info"
    host: str = "0.0.0.0"
    port: int = 8010

    @field_validator('storage_backend')
    @classmethod
    def validate_storage_backend(cls, v):
        v = v.lower()
        if v not in STORAGE_BACKENDS:
            raise ValueError(f"Storage backend must be one of {', '.join(STORAGE_BACKENDS)}")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        return v.lower()


# Global configuration instances
_db_config: Optional[DatabaseConfig] = None
_app_config: Optional[AppConfig] = None


def get_db_config() -> DatabaseConfig:
    """Get database configuration instance"""
    global _db_config
    if _db_config is None:
        _db_config = DatabaseConfig()
    return _db_config


def get_app_config() -> AppConfig:
    """Get application configuration instance"""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def reset_config():
    """Drop cached configuration so the next access re-reads the environment"""
    global _db_config, _app_config
    _db_config = None
    _app_config = None
