"""
➡️ But : Centraliser tous les paramètres configurables (adresse d'écoute, chemin DB, secrets, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d'environnement (.env, variables système…).

Les variables obligatoires n'ont pas de valeur par défaut : si l'une manque,
Settings() lève une ValidationError et le process s'arrête avant de servir.

Pas d'instance globale : create_app() construit un AppContext une seule fois
et le range dans app.state.

🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (development / production / test).
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional

from pydantic_settings import BaseSettings

from app.db.session import Database
from app.security.tokens import JWTSettings

ENV_DEVELOPMENT = "development"
ENV_PRODUCTION = "production"


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Media-Management"
    ADDR: str
    PORT: int
    ENV: str  # development | production | test
    LOG_LEVEL: Optional[str] = None  # auto selon ENV si None
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str  # fichier SQLite (":memory:" accepté pour les tests)
    DB_BUSY_TIMEOUT_MS: int = 5000

    # -----------------------------
    # Auth
    # -----------------------------
    USER_KEY: str                         # secret partagé pour /login
    JWT_KEY: str                          # clé de signature des tokens
    JWT_ISSUER: str = "media-management"
    TOKEN_TTL_HOURS: int = 168            # 7 jours

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        if self.LOG_LEVEL is None:
            level = "DEBUG" if self.ENV == ENV_DEVELOPMENT else "INFO"
            object.__setattr__(self, "LOG_LEVEL", level)

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.SQLITE_PATH}"


@dataclass
class AppContext:
    """
    État du process, initialisé une fois au démarrage puis partagé par référence.
    """
    settings: Settings
    database: Database
    jwt: JWTSettings


def build_jwt_settings(settings: Settings) -> JWTSettings:
    return JWTSettings(
        secret=settings.JWT_KEY,
        issuer=settings.JWT_ISSUER,
        algorithm="HS256",
        ttl=timedelta(hours=settings.TOKEN_TTL_HOURS),
    )


def build_context(settings: Settings) -> AppContext:
    database = Database(
        settings.database_url,
        busy_timeout_ms=settings.DB_BUSY_TIMEOUT_MS,
        echo=(settings.ENV == ENV_DEVELOPMENT),
    )
    return AppContext(settings=settings, database=database, jwt=build_jwt_settings(settings))
