import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("LIBRARY_APP_NAME", "Library")
    welcome_message: str = os.getenv("LIBRARY_WELCOME_MESSAGE", "Welcome to the library!")
    farewell_message: str = os.getenv("LIBRARY_FAREWELL_MESSAGE", "Thank you for using the library!")

    # Terminal
    clear_screen: bool = _env_flag("LIBRARY_CLEAR_SCREEN", "True")

    # Logging
    log_level: str = os.getenv("LIBRARY_LOG_LEVEL", "WARNING")
    log_file: Optional[str] = os.getenv("LIBRARY_LOG_FILE")


settings = Settings()
