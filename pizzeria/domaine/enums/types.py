from __future__ import annotations

import enum


class TypePizza(str, enum.Enum):
    """Type d’une pizza.

    - VIANDE : reine, pepperoni, bolognaise...
    - VEGETARIENNE : quatre fromages, légumes...
    - REGIONALE : bretonne aux Saint-Jacques, savoyarde au reblochon...
    """

    VIANDE = "Viande"
    VEGETARIENNE = "Vegetarienne"
    REGIONALE = "Regionale"


class EtatCommande(str, enum.Enum):
    """État d’une commande : CREEE -> VALIDEE -> TRAITEE."""

    CREEE = "CREEE"
    VALIDEE = "VALIDEE"
    TRAITEE = "TRAITEE"
