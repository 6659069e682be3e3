from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    """Client configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    # Amazon Product Advertising credentials
    amazon_access_key: str = ""
    amazon_secret_key: str = ""
    amazon_associate_tag: str = ""
    amazon_locale: str = "uk"  # ca, cn, de, es, fr, it, jp, uk, us

    # Request building
    use_ssl: bool = False
    retrieve_as_array: bool = False
    api_version: str = "2011-08-01"

    # The signed URL always uses http:// unless this is switched off,
    # in which case it keeps the scheme of the resolved endpoint
    pin_signed_url_to_http: bool = True

    # HTTP transport
    request_timeout: float = 30.0  # seconds

    # Error log bound (None keeps every entry)
    error_log_limit: Optional[int] = None

    # Logging
    log_level: str = "INFO"
    structured_logging: bool = False

    # Monitoring
    enable_metrics: bool = True

    @property
    def has_credentials(self) -> bool:
        return bool(self.amazon_access_key and self.amazon_secret_key)

# Singleton settings instance
settings = Settings()
