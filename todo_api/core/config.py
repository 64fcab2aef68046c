"""
➡️ But : Centraliser tous les paramètres configurables (nom d'app, URL du store, secret JWT, port...)

Utilise pydantic-settings pour charger automatiquement les variables d'environnement (.env, variables système…).

get_settings() renvoie une instance unique (mise en cache) ; create_app() la reçoit
explicitement, ce qui permet aux tests de fournir leur propre Settings.

🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (development / production / test).
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import make_url

from todo_api.security.tokens import JWTSettings, parse_ttl


# Valeurs d'exemple refusées comme secret de signature
PLACEHOLDER_JWT_SECRETS = {"CHANGE_ME", "change-me-to-a-long-random-string"}


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Todo-API"
    ENV: str = "production"  # development | production | test (détails d'erreur seulement en development)
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # Store
    # -----------------------------
    DATABASE_URL: str = "sqlite:///todo.db"
    # Mot de passe du store si l'URL n'en contient pas (équivalent de la "key" Supabase)
    DATABASE_KEY: Optional[str] = None

    # -----------------------------
    # JWT / Auth
    # -----------------------------
    JWT_SECRET: str = Field(min_length=1)    # obligatoire, pas de valeur par défaut
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_IN: str = "1h"               # "3600", "30m", "1h", "7d"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @field_validator("JWT_SECRET")
    @classmethod
    def _reject_placeholder_secret(cls, value: str) -> str:
        if not value.strip() or value.strip() in PLACEHOLDER_JWT_SECRETS:
            raise ValueError("JWT_SECRET must be set to a real secret")
        return value

    @property
    def is_development(self) -> bool:
        return self.ENV == "development"

    @property
    def database_url(self) -> str:
        """URL du store, avec DATABASE_KEY injectée comme mot de passe si besoin."""
        url = make_url(self.DATABASE_URL)
        if self.DATABASE_KEY and url.password is None and not url.drivername.startswith("sqlite"):
            url = url.set(password=self.DATABASE_KEY)
        return url.render_as_string(hide_password=False)

    def jwt_settings(self) -> JWTSettings:
        """Objet JWT prêt à l'emploi pour les services (construit une fois au démarrage)."""
        return JWTSettings(
            secret=self.JWT_SECRET,
            algorithm=self.JWT_ALGORITHM,
            ttl=parse_ttl(self.JWT_EXPIRES_IN),
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Settings du process (lu une seule fois).
    Pour les tests : get_settings.cache_clear() ou passer un Settings à create_app().
    """
    return Settings()
