from __future__ import annotations

from fastapi import Header, HTTPException, Request, status

from pizzeria.core.configuration import parametres_application
from pizzeria.domaine.donnees import DonneesPizzeria
from pizzeria.domaine.services.service_client import ServiceClient
from pizzeria.domaine.services.service_pizzaiolo import ServicePizzaiolo
from pizzeria.persistance.sauvegarde import ServiceSauvegarde


def fournir_donnees(request: Request) -> DonneesPizzeria:
    """Dépendance FastAPI : données partagées de l’application."""

    return request.app.state.donnees


def fournir_service_client(request: Request) -> ServiceClient:
    # Un service par requête : les filtres ne survivent pas à la requête.
    return ServiceClient(fournir_donnees(request))


def fournir_service_pizzaiolo(request: Request) -> ServicePizzaiolo:
    return ServicePizzaiolo(fournir_donnees(request))


def fournir_service_sauvegarde(request: Request) -> ServiceSauvegarde:
    return ServiceSauvegarde(fournir_donnees(request))


def verifier_acces_interne(
    x_cle_interne: str | None = Header(default=None, alias="X-CLE-INTERNE"),
) -> None:
    """Contrôle d’accès minimal de l’API pizzaïolo.

    Règle : le header X-CLE-INTERNE doit valoir la clé configurée.
    """

    if x_cle_interne is None or not x_cle_interne.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Accès interne refusé (header X-CLE-INTERNE manquant).",
        )
    if x_cle_interne != parametres_application.cle_interne:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Accès interne refusé (clé invalide).",
        )
