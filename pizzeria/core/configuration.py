from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParametresApplication(BaseSettings):
    """Paramètres de l’application.

    Surchargeables par variables d’environnement ou fichier `.env`.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Clé attendue dans le header X-CLE-INTERNE (API pizzaïolo).
    cle_interne: str = "dev-token"

    fichier_sauvegarde: str = "pizzeria.db"

    # Variable d’environnement LOG_LEVEL
    niveau_log: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Prix minimal = somme des ingrédients majorée, arrondie au multiple supérieur.
    taux_majoration_prix_minimal: float = 0.40
    arrondi_prix_minimal: float = 10.0


parametres_application = ParametresApplication()
