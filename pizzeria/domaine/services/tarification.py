"""Calcul des prix de vente.

Règles :
- Prix minimal = somme(prix des ingrédients) * (1 + taux), arrondi au multiple
  supérieur de `arrondi` (10 € par défaut).
- Prix effectif = prix fixé manuellement (> 0), sinon le prix minimal.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from pizzeria.core.configuration import parametres_application
from pizzeria.domaine.modeles import Pizza


def calculer_prix_minimal(
    pizza: Pizza,
    prix_ingredients: Mapping[str, float],
    *,
    taux: float | None = None,
    arrondi: float | None = None,
) -> float:
    if taux is None:
        taux = parametres_application.taux_majoration_prix_minimal
    if arrondi is None:
        arrondi = parametres_application.arrondi_prix_minimal

    total = sum(prix_ingredients.get(nom, 0.0) for nom in pizza.ingredients)
    majore = round(total * (1 + taux), 6)
    if arrondi <= 0:
        return majore
    return float(math.ceil(majore / arrondi) * arrondi)


def calculer_prix_effectif(pizza: Pizza, prix_ingredients: Mapping[str, float]) -> float:
    if pizza.prix_vente > 0:
        return float(pizza.prix_vente)
    return calculer_prix_minimal(pizza, prix_ingredients)
