"""
Application settings loaded from environment variables (and an optional .env file).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.hashids import DEFAULT_ALPHABET, DEFAULT_MIN_LENGTH, HashIdLookup, HashIdOptions
from app.exceptions import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_name: str = "Users API"
    debug: bool = False
    log_level: str = "INFO"

    # --- Database ---
    database_url: str = "sqlite+aiosqlite:///./app.db"
    database_echo: bool = False
    create_tables: bool = False  # Create the schema on startup (local development only)

    # --- Hashids ---
    # The application key doubles as the hashid salt unless a dedicated salt is set.
    app_key: str | None = None
    hashid_salt: str | None = None
    hashid_min_length: int = DEFAULT_MIN_LENGTH
    hashid_alphabet: str = DEFAULT_ALPHABET
    hashid_lookup: HashIdLookup = HashIdLookup.PRIMARY_KEY

    # --- Server ---
    host: str = "0.0.0.0"
    port: int = 8000

    def hashid_options(self) -> HashIdOptions:
        """
        Builds the explicit codec configuration. Fails at startup (not on the
        first request) when no salt is available.
        """
        salt = self.hashid_salt or self.app_key
        if not salt:
            raise ConfigurationError("No hashid salt configured: set HASHID_SALT or APP_KEY.")

        return HashIdOptions(salt=salt, min_length=self.hashid_min_length, alphabet=self.hashid_alphabet)


@lru_cache
def get_settings() -> Settings:
    return Settings()
