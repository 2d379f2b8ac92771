from __future__ import annotations

from typing import Protocol

from pizzeria.domaine.enums.types import TypePizza
from pizzeria.domaine.modeles import Commande, Evaluation, InformationPersonnelle, Pizza


class ContratClient(Protocol):
    """Services utilisés par un client pour commander et évaluer des pizzas.

    Les opérations liées à un compte lèvent `ErreurNonConnecte` si aucun client
    n’est connecté, et `ErreurCommande` si la commande fournie est invalide.
    """

    def inscription(self, email: str, mot_de_passe: str, informations: InformationPersonnelle) -> int:
        ...

    def connexion(self, email: str, mot_de_passe: str) -> bool:
        ...

    def deconnexion(self) -> None:
        ...

    def debuter_commande(self) -> Commande:
        ...

    def ajouter_pizza(self, pizza: Pizza, nombre: int, commande: Commande) -> None:
        ...

    def valider_commande(self, commande: Commande) -> None:
        ...

    def annuler_commande(self, commande: Commande) -> None:
        ...

    def commandes_en_cours(self) -> list[Commande]:
        ...

    def commandes_passees(self) -> list[Commande]:
        ...

    def pizzas(self) -> set[Pizza]:
        ...

    def ajouter_filtre_type(self, type_pizza: TypePizza) -> None:
        ...

    def ajouter_filtre_ingredients(self, *ingredients: str) -> None:
        ...

    def ajouter_filtre_prix_maximum(self, prix_maximum: float) -> None:
        ...

    def selection_pizzas_filtres(self) -> set[Pizza]:
        ...

    def supprimer_filtres(self) -> None:
        ...

    def evaluations_pizza(self, pizza: Pizza) -> list[Evaluation] | None:
        ...

    def note_moyenne(self, pizza: Pizza) -> float:
        ...

    def ajouter_evaluation(self, pizza: Pizza, note: int, commentaire: str | None) -> bool:
        ...


class ContratPizzaiolo(Protocol):
    """Services utilisés par le pizzaïolo : ingrédients, pizzas, prix, statistiques."""

    def creer_ingredient(self, nom: str, prix: float) -> int:
        ...

    def changer_prix_ingredient(self, nom: str, prix: float) -> int:
        ...

    def interdire_ingredient(self, nom_ingredient: str, type_pizza: TypePizza) -> bool:
        ...

    def creer_pizza(self, nom: str, type_pizza: TypePizza) -> Pizza | None:
        ...

    def ajouter_ingredient_pizza(self, pizza: Pizza, nom_ingredient: str) -> int:
        ...

    def retirer_ingredient_pizza(self, pizza: Pizza, nom_ingredient: str) -> int:
        ...

    def verifier_ingredients_pizza(self, pizza: Pizza) -> set[str] | None:
        ...

    def ajouter_photo(self, pizza: Pizza, fichier: str) -> bool:
        ...

    def prix_pizza(self, pizza: Pizza) -> float:
        ...

    def fixer_prix_pizza(self, pizza: Pizza, prix: float) -> bool:
        ...

    def calculer_prix_minimal_pizza(self, pizza: Pizza) -> float:
        ...

    def pizzas(self) -> set[Pizza]:
        ...

    def ensemble_clients(self) -> set[InformationPersonnelle]:
        ...

    def commandes_deja_traitees(self) -> list[Commande]:
        ...

    def commandes_non_traitees(self) -> list[Commande]:
        ...

    def commandes_traitees_client(self, client: InformationPersonnelle) -> list[Commande] | None:
        ...

    def benefice_par_pizza(self) -> dict[Pizza, float]:
        ...

    def benefice_commande(self, commande: Commande) -> float:
        ...

    def benefice_toutes_commandes(self) -> float:
        ...

    def nombre_pizzas_commandees_par_client(self) -> dict[InformationPersonnelle, int]:
        ...

    def benefice_par_client(self) -> dict[InformationPersonnelle, float]:
        ...

    def nombre_pizzas_commandees(self, pizza: Pizza) -> int:
        ...

    def classement_pizzas_par_nombre_commandes(self) -> list[Pizza]:
        ...


class ContratSauvegarde(Protocol):
    """Sauvegarde / chargement de toutes les données dans un fichier.

    Les erreurs d’entrée/sortie remontent en `OSError`.
    """

    async def sauvegarder_donnees(self, nom_fichier: str) -> None:
        ...

    async def charger_donnees(self, nom_fichier: str) -> None:
        ...
