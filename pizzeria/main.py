from __future__ import annotations

from fastapi import FastAPI

from pizzeria.api.routeur import router
from pizzeria.api.sante import routeur_sante
from pizzeria.core.logging_config import configurer_logging
from pizzeria.domaine.donnees import DonneesPizzeria


def creer_application(donnees: DonneesPizzeria | None = None) -> FastAPI:
    configurer_logging()

    application = FastAPI(title="Pizzeria")

    # Données partagées par toutes les requêtes
    application.state.donnees = donnees if donnees is not None else DonneesPizzeria()

    # Routes
    application.include_router(router)

    # Santé
    application.include_router(routeur_sante)

    return application


app = creer_application()
