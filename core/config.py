from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    # 1️⃣ Database
    DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = False

    # 2️⃣ HTTP listener
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # 3️⃣ Email relay
    MAIL_SERVER: str = "localhost"
    MAIL_PORT: int = 587
    MAIL_USERNAME: str = ""
    MAIL_PASSWORD: str = ""
    MAIL_FROM: Optional[str] = None
    MAIL_FROM_NAME: Optional[str] = None
    MAIL_STARTTLS: bool = False
    MAIL_SSL_TLS: bool = False
    USE_CREDENTIALS: bool = True
    MAIL_SUPPRESS_SEND: bool = False

    # frontend origins
    FRONTEND_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def mailbox(self) -> str:
        """Address notifications are sent from and delivered to."""
        return self.MAIL_FROM or self.MAIL_USERNAME


settings = Settings()
