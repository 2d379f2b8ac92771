from __future__ import annotations

from dataclasses import dataclass, field

from pizzeria.domaine.enums.types import TypePizza
from pizzeria.domaine.modeles import Commande, InformationPersonnelle, Pizza


@dataclass
class CompteClient:
    email: str
    mot_de_passe_hash: str
    informations: InformationPersonnelle


@dataclass
class DonneesPizzeria:
    """Données de l’application, partagées par les services client et pizzaïolo.

    - `pizzas` : indexées par nom (le nom est l’identité d’une pizza)
    - `commandes` : toutes les commandes, dans l’ordre de création
    - `evaluations_clients` : couples (email, nom de pizza) déjà évalués
    """

    clients: dict[str, CompteClient] = field(default_factory=dict)
    ingredients: dict[str, float] = field(default_factory=dict)
    interdictions: dict[TypePizza, set[str]] = field(default_factory=dict)
    pizzas: dict[str, Pizza] = field(default_factory=dict)
    commandes: list[Commande] = field(default_factory=list)
    evaluations_clients: set[tuple[str, str]] = field(default_factory=set)

    def pizza_valide(self, pizza: Pizza | None) -> bool:
        """Une pizza est valide si c’est l’instance créée par le pizzaïolo."""

        return pizza is not None and self.pizzas.get(pizza.nom) is pizza

    def commande_valide(self, commande: Commande | None) -> bool:
        return commande is not None and any(c is commande for c in self.commandes)

    def ingredients_interdits(self, type_pizza: TypePizza) -> set[str]:
        return self.interdictions.get(type_pizza, set())

    def remplacer_par(self, autres: DonneesPizzeria) -> None:
        """Remplace le contenu en place (les services gardent la même référence)."""

        self.clients = autres.clients
        self.ingredients = autres.ingredients
        self.interdictions = autres.interdictions
        self.pizzas = autres.pizzas
        self.commandes = autres.commandes
        self.evaluations_clients = autres.evaluations_clients
