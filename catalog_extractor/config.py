from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    # Logs and parsed output land under the working directory
    BASE_DIR: Path = Path.cwd()

    # Storage directories
    LOGS_DIR: Path = BASE_DIR / "logs"
    OUTPUT_DIR: Path = BASE_DIR / "parsed"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    # Number of leading pages used as the format-detection sample
    SAMPLE_PAGES: int = 10

    # Accepted competency unit range for table lookups
    MIN_COMPETENCY_UNITS: int = 1
    MAX_COMPETENCY_UNITS: int = 12

    # Description thresholds
    MIN_DESCRIPTION_LENGTH: int = 20
    INLINE_DESCRIPTION_MIN_LENGTH: int = 50

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CATALOG_", extra="ignore")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.ensure_directories()

    def ensure_directories(self):
        """Ensure the log directory exists when file logging is on"""
        if self.LOG_TO_FILE:
            self.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    @property
    def cu_range(self):
        return (self.MIN_COMPETENCY_UNITS, self.MAX_COMPETENCY_UNITS)
