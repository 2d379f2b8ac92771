from __future__ import annotations

from fastapi import APIRouter

from pizzeria.api.endpoints.client import routeur_client
from pizzeria.api.endpoints.pizzaiolo import routeur_pizzaiolo_interne


# ==============================
# ROUTEUR PRINCIPAL
# ==============================
router = APIRouter()

# API client publique
router.include_router(routeur_client)

# API interne (pizzaïolo)
router.include_router(routeur_pizzaiolo_interne)
