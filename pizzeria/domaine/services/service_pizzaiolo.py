"""Service du pizzaïolo : ingrédients, composition des pizzas, prix, statistiques.

Règles :
- Les opérations qui reçoivent une pizza ne s’appliquent qu’aux pizzas créées
  par `creer_pizza` (même instance).
- Les statistiques ne portent que sur les commandes TRAITEE.
- Bénéfice unitaire d’une pizza = prix de vente - prix minimal (jamais < 0).
"""

from __future__ import annotations

import logging
from pathlib import Path

from pizzeria.domaine.donnees import DonneesPizzeria
from pizzeria.domaine.enums.types import EtatCommande, TypePizza
from pizzeria.domaine.modeles import Commande, InformationPersonnelle, Pizza
from pizzeria.domaine.services.contrats import ContratPizzaiolo
from pizzeria.domaine.services.tarification import calculer_prix_effectif, calculer_prix_minimal


logger = logging.getLogger(__name__)

# Signatures des formats d’image acceptés pour les photos.
_SIGNATURES_IMAGE: tuple[bytes, ...] = (
    b"\x89PNG\r\n\x1a\n",
    b"\xff\xd8\xff",
    b"GIF87a",
    b"GIF89a",
    b"BM",
)


def _est_image(entete: bytes) -> bool:
    if any(entete.startswith(s) for s in _SIGNATURES_IMAGE):
        return True
    return entete[:4] == b"RIFF" and entete[8:12] == b"WEBP"


def _nom_valide(nom: str | None) -> bool:
    return nom is not None and bool(nom.strip())


class ServicePizzaiolo(ContratPizzaiolo):
    def __init__(self, donnees: DonneesPizzeria) -> None:
        self._donnees = donnees

    # ------------------------------------------------------------------
    # Ingrédients
    # ------------------------------------------------------------------

    def creer_ingredient(self, nom: str, prix: float) -> int:
        if not _nom_valide(nom):
            return -1
        if nom in self._donnees.ingredients:
            return -2
        if prix is None or prix <= 0:
            return -3

        self._donnees.ingredients[nom] = float(prix)
        logger.info("ingredient_cree nom=%s prix=%s", nom, prix)
        return 0

    def changer_prix_ingredient(self, nom: str, prix: float) -> int:
        if not _nom_valide(nom):
            return -1
        if prix is None or prix <= 0:
            return -2
        if nom not in self._donnees.ingredients:
            return -3

        self._donnees.ingredients[nom] = float(prix)
        return 0

    def interdire_ingredient(self, nom_ingredient: str, type_pizza: TypePizza) -> bool:
        if nom_ingredient not in self._donnees.ingredients or type_pizza is None:
            return False

        self._donnees.interdictions.setdefault(type_pizza, set()).add(nom_ingredient)
        return True

    # ------------------------------------------------------------------
    # Pizzas
    # ------------------------------------------------------------------

    def creer_pizza(self, nom: str, type_pizza: TypePizza) -> Pizza | None:
        if not _nom_valide(nom) or type_pizza is None or nom in self._donnees.pizzas:
            return None

        pizza = Pizza(nom, type_pizza)
        self._donnees.pizzas[nom] = pizza
        logger.info("pizza_creee nom=%s type=%s", nom, type_pizza.value)
        return pizza

    def ajouter_ingredient_pizza(self, pizza: Pizza, nom_ingredient: str) -> int:
        if not self._donnees.pizza_valide(pizza):
            return -1
        if not _nom_valide(nom_ingredient) or nom_ingredient not in self._donnees.ingredients:
            return -2
        if nom_ingredient in self._donnees.ingredients_interdits(pizza.type_pizza):
            return -3

        if nom_ingredient not in pizza.ingredients:
            pizza.ajouter_ingredient(nom_ingredient)
        return 0

    def retirer_ingredient_pizza(self, pizza: Pizza, nom_ingredient: str) -> int:
        if not self._donnees.pizza_valide(pizza):
            return -1
        if not _nom_valide(nom_ingredient) or nom_ingredient not in self._donnees.ingredients:
            return -2
        if nom_ingredient not in pizza.ingredients:
            return -3

        pizza.ingredients.remove(nom_ingredient)
        return 0

    def verifier_ingredients_pizza(self, pizza: Pizza) -> set[str] | None:
        if not self._donnees.pizza_valide(pizza):
            return None
        return set(pizza.ingredients) & self._donnees.ingredients_interdits(pizza.type_pizza)

    def ajouter_photo(self, pizza: Pizza, fichier: str) -> bool:
        """Associe une photo à la pizza.

        Lève `OSError` si le fichier ne peut pas être lu.
        """

        if not self._donnees.pizza_valide(pizza) or not fichier:
            return False

        with Path(fichier).open("rb") as f:
            entete = f.read(16)

        if not _est_image(entete):
            logger.info("photo_refusee pizza=%s fichier=%s", pizza.nom, fichier)
            return False

        pizza.chemin_photo = fichier
        return True

    def pizzas(self) -> set[Pizza]:
        return set(self._donnees.pizzas.values())

    # ------------------------------------------------------------------
    # Prix
    # ------------------------------------------------------------------

    def prix_pizza(self, pizza: Pizza) -> float:
        if not self._donnees.pizza_valide(pizza):
            return -1
        return calculer_prix_effectif(pizza, self._donnees.ingredients)

    def fixer_prix_pizza(self, pizza: Pizza, prix: float) -> bool:
        if not self._donnees.pizza_valide(pizza) or prix is None:
            return False
        if prix < calculer_prix_minimal(pizza, self._donnees.ingredients):
            return False

        pizza.prix_vente = float(prix)
        return True

    def calculer_prix_minimal_pizza(self, pizza: Pizza) -> float:
        if not self._donnees.pizza_valide(pizza):
            return -1
        return calculer_prix_minimal(pizza, self._donnees.ingredients)

    # ------------------------------------------------------------------
    # Clients et commandes
    # ------------------------------------------------------------------

    def ensemble_clients(self) -> set[InformationPersonnelle]:
        return {compte.informations for compte in self._donnees.clients.values()}

    def commandes_deja_traitees(self) -> list[Commande]:
        return self._commandes_par_etat(EtatCommande.TRAITEE)

    def commandes_non_traitees(self) -> list[Commande]:
        """Commandes validées à traiter ; une fois lues, elles sont TRAITEE."""

        a_traiter = self._commandes_par_etat(EtatCommande.VALIDEE)
        for commande in a_traiter:
            commande.etat = EtatCommande.TRAITEE
        if a_traiter:
            logger.info("commandes_traitees nb=%s", len(a_traiter))
        return a_traiter

    def commandes_traitees_client(self, client: InformationPersonnelle) -> list[Commande] | None:
        emails = {e for e, compte in self._donnees.clients.items() if compte.informations == client}
        if not emails:
            return None
        return [c for c in self.commandes_deja_traitees() if c.email_client in emails]

    # ------------------------------------------------------------------
    # Statistiques
    # ------------------------------------------------------------------

    def benefice_par_pizza(self) -> dict[Pizza, float]:
        return {pizza: self._benefice_unitaire(pizza) for pizza in self._donnees.pizzas.values()}

    def benefice_commande(self, commande: Commande) -> float:
        if not self._donnees.commande_valide(commande) or commande.pizza is None:
            return -1
        return self._benefice_unitaire(commande.pizza) * commande.quantite

    def benefice_toutes_commandes(self) -> float:
        return sum((self.benefice_commande(c) for c in self.commandes_deja_traitees()), 0.0)

    def nombre_pizzas_commandees_par_client(self) -> dict[InformationPersonnelle, int]:
        resultat = {compte.informations: 0 for compte in self._donnees.clients.values()}
        for commande in self.commandes_deja_traitees():
            compte = self._donnees.clients.get(commande.email_client)
            if compte is not None:
                resultat[compte.informations] += commande.quantite
        return resultat

    def benefice_par_client(self) -> dict[InformationPersonnelle, float]:
        resultat = {compte.informations: 0.0 for compte in self._donnees.clients.values()}
        for commande in self.commandes_deja_traitees():
            compte = self._donnees.clients.get(commande.email_client)
            if compte is not None:
                resultat[compte.informations] += self.benefice_commande(commande)
        return resultat

    def nombre_pizzas_commandees(self, pizza: Pizza) -> int:
        if not self._donnees.pizza_valide(pizza):
            return -1
        return sum(c.quantite for c in self.commandes_deja_traitees() if c.pizza is pizza)

    def classement_pizzas_par_nombre_commandes(self) -> list[Pizza]:
        # Plus commandée en premier ; à égalité, ordre alphabétique.
        return sorted(
            self._donnees.pizzas.values(),
            key=lambda p: (-self.nombre_pizzas_commandees(p), p.nom),
        )

    # ------------------------------------------------------------------
    # Outils internes
    # ------------------------------------------------------------------

    def _benefice_unitaire(self, pizza: Pizza) -> float:
        prix = calculer_prix_effectif(pizza, self._donnees.ingredients)
        minimal = calculer_prix_minimal(pizza, self._donnees.ingredients)
        return max(prix - minimal, 0.0)

    def _commandes_par_etat(self, etat: EtatCommande) -> list[Commande]:
        return sorted((c for c in self._donnees.commandes if c.etat == etat), key=lambda c: c.date_heure)
