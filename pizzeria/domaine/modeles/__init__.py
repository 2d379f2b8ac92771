"""Objets valeur du domaine.

Aucune persistance ici : uniquement les données et leurs règles de validation.
"""

from pizzeria.domaine.modeles.commande import Commande
from pizzeria.domaine.modeles.evaluation import Evaluation
from pizzeria.domaine.modeles.information_personnelle import InformationPersonnelle
from pizzeria.domaine.modeles.pizza import Pizza

__all__ = [
    "Commande",
    "Evaluation",
    "InformationPersonnelle",
    "Pizza",
]
