# ledger_view/core/config/settings.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from ledger_view.core.enums.sort_key import SortKey
from ledger_view.core.enums.sort_order import SortOrder

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or .env file.
    Includes general app settings and the initial state of the transactions table.
    """
    # General App Settings
    APP_NAME: str = "Ledger View"
    APP_VERSION: str = "0.1.0"
    DEBUG_MODE: bool = False

    # Logging Settings
    LOG_LEVEL: str = "INFO" # e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Table Settings
    DEFAULT_SORT_KEY: SortKey = SortKey.DATE
    DEFAULT_SORT_ORDER: SortOrder = SortOrder.DESC
    DECIMAL_PRECISION: int = 28

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

settings = Settings()
