import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application settings
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Library Desk"))
    app_version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))

    # Logging settings
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    # CLI output settings: plain | json | rich
    output_mode: str = field(default_factory=lambda: os.getenv("LIB_CLI_OUTPUT", "plain").lower())
    # Rendering of issue dates in plain and rich output
    datetime_format: str = field(default_factory=lambda: os.getenv("DATETIME_FORMAT", "%d.%m.%Y %H:%M:%S"))

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


settings = Settings()
