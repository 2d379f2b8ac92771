from __future__ import annotations

from fastapi import APIRouter, Depends

from pizzeria.api.dependances import fournir_donnees
from pizzeria.domaine.donnees import DonneesPizzeria

routeur_sante = APIRouter(tags=["sante"])


@routeur_sante.get("/health")
async def health(donnees: DonneesPizzeria = Depends(fournir_donnees)) -> dict[str, str | int]:
    """L’application répond et ses données sont chargées."""

    return {"statut": "ok", "pizzas": len(donnees.pizzas), "commandes": len(donnees.commandes)}
