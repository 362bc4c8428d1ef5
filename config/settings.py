from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	APP_NAME: str = 'Best Rate Engine'

	# Input
	DATETIME_FORMAT: str = '%Y-%m-%dT%H:%M:%S%z'
	QUERY_MARKER: str = 'EXCHANGE_RATE_REQUEST'
	REQUIRE_QUERY_MARKER: bool = True

	# Graph
	SYNTHETIC_LINK_WEIGHT: float = 1.0

	# Output
	NO_RATE_PLACEHOLDER: str = 'NONE'

	# Logging
	LOG_LEVEL: str = 'WARNING'
	LOG_JSON: bool = False
	LOG_FILE: str = ''

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
