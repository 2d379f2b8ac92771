from __future__ import annotations

from pizzeria.domaine.enums.types import TypePizza
from pizzeria.domaine.modeles.evaluation import Evaluation


class Pizza:
    """Pizza du catalogue.

    IMPORTANT :
    - L’identité d’une pizza est son nom : égalité et hash ne portent que sur `nom`.
    - Aucune validation ici (prix, photo, doublons d’ingrédients) : c’est le rôle
      des services.
    """

    def __init__(self, nom: str, type_pizza: TypePizza) -> None:
        self._nom = nom
        self._type_pizza = type_pizza
        self.ingredients: list[str] = []
        self.evaluations: list[Evaluation] = []
        self.prix_vente: float = 0.0
        self.chemin_photo: str | None = None

    @property
    def nom(self) -> str:
        return self._nom

    @property
    def type_pizza(self) -> TypePizza:
        return self._type_pizza

    def ajouter_ingredient(self, ingredient: str) -> None:
        self.ingredients.append(ingredient)

    def ajouter_evaluation(self, evaluation: Evaluation) -> None:
        self.evaluations.append(evaluation)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Pizza):
            return NotImplemented
        return self._nom == other._nom

    def __hash__(self) -> int:
        return hash(self._nom)

    def __str__(self) -> str:
        return f"Pizza[nom={self._nom}, type={self._type_pizza.value}, prix={float(self.prix_vente)}]"

    __repr__ = __str__
