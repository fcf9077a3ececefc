"""Settings for constraintkit."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConstraintKitSettings(BaseSettings):
    """constraintkit configuration settings."""

    LOG_LEVEL: str = "INFO"

    # Reserved document identity field of the search engine
    ID_FIELD: str = "_id"
    # Entity attribute name which is remapped onto ID_FIELD by equality constraints
    ENTITY_ID_FIELD: str = "id"

    # Placeholder written instead of constraint values when descriptions are redacted
    REDACTED_VALUE: str = "?"

    # IANA zone used to turn instants into civil date-times, e.g. "Europe/Berlin".
    # None means the system default zone.
    TIME_ZONE: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = ConstraintKitSettings()
