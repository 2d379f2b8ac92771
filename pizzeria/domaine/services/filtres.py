from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from pizzeria.domaine.enums.types import TypePizza
from pizzeria.domaine.modeles import Pizza


class Filtre(Protocol):
    def accepte(self, pizza: Pizza, prix: float) -> bool:
        ...


@dataclass(frozen=True)
class FiltreType:
    type_pizza: TypePizza

    def accepte(self, pizza: Pizza, prix: float) -> bool:
        return pizza.type_pizza == self.type_pizza


@dataclass(frozen=True)
class FiltreIngredients:
    """Conserve les pizzas qui contiennent tous les ingrédients."""

    ingredients: frozenset[str]

    def accepte(self, pizza: Pizza, prix: float) -> bool:
        return self.ingredients.issubset(pizza.ingredients)


@dataclass(frozen=True)
class FiltrePrixMaximum:
    prix_maximum: float

    def accepte(self, pizza: Pizza, prix: float) -> bool:
        return prix <= self.prix_maximum
