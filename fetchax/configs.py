from pydantic import Field, PositiveFloat
from pydantic_settings import BaseSettings, SettingsConfigDict


class TransportConfig(BaseSettings):
    """
    Configuration for the default httpx transport
    """

    TIMEOUT: PositiveFloat = Field(
        description="Timeout in seconds applied when a request does not set one",
        default=30.0,
    )

    VERIFY_TLS: bool = Field(
        description="Whether TLS certificates of remote hosts are verified",
        default=True,
    )

    FOLLOW_REDIRECTS: bool = Field(
        description="Whether redirects are followed when a request does not set a redirect mode",
        default=True,
    )


class LoggingConfig(BaseSettings):
    """
    Configuration for library logging
    """

    LOG_LEVEL: str = Field(
        description="Logging level, default to INFO.",
        default="INFO",
    )

    LOG_FORMAT: str = Field(
        description="Format string for log messages",
        default=(
            "%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] "
            "[%(filename)s:%(lineno)d] %(request_id)s - %(message)s"
        ),
    )

    LOG_DATEFORMAT: str | None = Field(
        description="Date format string for log timestamps",
        default=None,
    )


class FetchAXConfig(TransportConfig, LoggingConfig):
    model_config = SettingsConfigDict(
        env_prefix="FETCHAX_",
        # read from dotenv format config file
        env_file=".env",
        env_file_encoding="utf-8",
        # ignore extra attributes
        extra="ignore",
    )


fetchax_config: FetchAXConfig = FetchAXConfig()

__all__ = ["FetchAXConfig", "fetchax_config"]
