"""
Konfiguration für das Ladenkonto (Crate Ledger) Backend
"""
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings


class UserAccount(BaseModel):
    """Eintrag der PIN-Tabelle"""
    name: str
    role: Literal["admin", "driver"]


# Standard-PIN-Tabelle, per USERS_BY_PIN (JSON) überschreibbar
DEFAULT_USERS_BY_PIN: dict[str, UserAccount] = {
    "0717": UserAccount(name="Admin", role="admin"),
    "111111": UserAccount(name="Ákos", role="driver"),
    "222222": UserAccount(name="Gyuri", role="driver"),
    "333333": UserAccount(name="Vasárnapi", role="driver"),
}


class Settings(BaseSettings):
    """Anwendungseinstellungen aus Umgebungsvariablen"""

    # Anwendung
    app_name: str = "Crate Ledger"
    app_version: str = "1.0.0"
    debug: bool = False

    # Datenbank (ohne URL ist der Store nicht erreichbar)
    database_url: str | None = None

    # Sicherheit
    secret_key: str = "your-secret-key-change-in-production"
    access_token_expire_minutes: int = 60 * 12  # 12 Stunden

    # PIN -> Benutzer
    users_by_pin: dict[str, UserAccount] = DEFAULT_USERS_BY_PIN

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Cached Settings-Instanz"""
    return Settings()
