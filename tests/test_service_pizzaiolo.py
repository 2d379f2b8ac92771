from __future__ import annotations

from pathlib import Path

import pytest

from pizzeria.domaine.donnees import DonneesPizzeria
from pizzeria.domaine.enums.types import EtatCommande, TypePizza
from pizzeria.domaine.modeles import Commande, InformationPersonnelle, Pizza
from pizzeria.domaine.services.service_client import ServiceClient
from pizzeria.domaine.services.service_pizzaiolo import ServicePizzaiolo


# ─────────────────────────────────────────────────────────────
# Ingrédients
# ─────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "nom,prix,code",
    [
        ("tomate", 1.0, 0),
        ("", 1.0, -1),
        ("   ", 1.0, -1),
        (None, 1.0, -1),
        ("tomate", 0.0, -3),
        ("tomate", -2.0, -3),
    ],
)
def test_creer_ingredient(pizzaiolo: ServicePizzaiolo, nom: str, prix: float, code: int) -> None:
    assert pizzaiolo.creer_ingredient(nom, prix) == code


def test_creer_ingredient_existant(pizzaiolo: ServicePizzaiolo) -> None:
    assert pizzaiolo.creer_ingredient("tomate", 1.0) == 0
    assert pizzaiolo.creer_ingredient("tomate", 2.0) == -2


def test_changer_prix_ingredient(pizzaiolo: ServicePizzaiolo, donnees: DonneesPizzeria) -> None:
    pizzaiolo.creer_ingredient("tomate", 1.0)

    assert pizzaiolo.changer_prix_ingredient("", 2.0) == -1
    assert pizzaiolo.changer_prix_ingredient("tomate", 0) == -2
    assert pizzaiolo.changer_prix_ingredient("ananas", 2.0) == -3
    assert pizzaiolo.changer_prix_ingredient("tomate", 2.0) == 0
    assert donnees.ingredients["tomate"] == 2.0


def test_interdire_ingredient_inconnu(pizzaiolo: ServicePizzaiolo, donnees: DonneesPizzeria) -> None:
    assert not pizzaiolo.interdire_ingredient("ananas", TypePizza.REGIONALE)
    assert donnees.interdictions == {}


# ─────────────────────────────────────────────────────────────
# Pizzas
# ─────────────────────────────────────────────────────────────


def test_creer_pizza(pizzaiolo: ServicePizzaiolo) -> None:
    pizza = pizzaiolo.creer_pizza("Reine", TypePizza.VIANDE)
    assert pizza is not None
    assert pizzaiolo.pizzas() == {pizza}

    assert pizzaiolo.creer_pizza("Reine", TypePizza.VEGETARIENNE) is None
    assert pizzaiolo.creer_pizza("", TypePizza.VIANDE) is None


def test_ajouter_ingredient_pizza(pizzaiolo: ServicePizzaiolo, catalogue: dict[str, Pizza]) -> None:
    margarita = catalogue["Margarita"]

    assert pizzaiolo.ajouter_ingredient_pizza(Pizza("Margarita", TypePizza.VEGETARIENNE), "tomate") == -1
    assert pizzaiolo.ajouter_ingredient_pizza(margarita, "ananas") == -2
    assert pizzaiolo.ajouter_ingredient_pizza(margarita, "") == -2
    assert pizzaiolo.ajouter_ingredient_pizza(margarita, "jambon") == -3
    assert pizzaiolo.ajouter_ingredient_pizza(margarita, "champignon") == 0
    assert margarita.ingredients == ["tomate", "mozzarella", "champignon"]


def test_ajouter_ingredient_deja_present_sans_effet(
    pizzaiolo: ServicePizzaiolo,
    catalogue: dict[str, Pizza],
) -> None:
    margarita = catalogue["Margarita"]
    assert pizzaiolo.ajouter_ingredient_pizza(margarita, "tomate") == 0
    assert margarita.ingredients.count("tomate") == 1


def test_retirer_ingredient_pizza(pizzaiolo: ServicePizzaiolo, catalogue: dict[str, Pizza]) -> None:
    reine = catalogue["Reine"]

    assert pizzaiolo.retirer_ingredient_pizza(None, "tomate") == -1  # type: ignore[arg-type]
    assert pizzaiolo.retirer_ingredient_pizza(reine, "ananas") == -2
    assert pizzaiolo.retirer_ingredient_pizza(reine, "reblochon") == -3
    assert pizzaiolo.retirer_ingredient_pizza(reine, "jambon") == 0
    assert "jambon" not in reine.ingredients


def test_verifier_ingredients_pizza(pizzaiolo: ServicePizzaiolo, catalogue: dict[str, Pizza]) -> None:
    margarita = catalogue["Margarita"]
    assert pizzaiolo.verifier_ingredients_pizza(margarita) == set()

    # Interdiction ajoutée après la composition de la pizza
    assert pizzaiolo.interdire_ingredient("mozzarella", TypePizza.VEGETARIENNE)
    assert pizzaiolo.verifier_ingredients_pizza(margarita) == {"mozzarella"}

    assert pizzaiolo.verifier_ingredients_pizza(Pizza("Inconnue", TypePizza.VIANDE)) is None


def test_ajouter_photo(pizzaiolo: ServicePizzaiolo, catalogue: dict[str, Pizza], tmp_path: Path) -> None:
    reine = catalogue["Reine"]

    image = tmp_path / "reine.png"
    image.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 32)
    texte = tmp_path / "reine.txt"
    texte.write_text("pas une image")

    assert not pizzaiolo.ajouter_photo(reine, str(texte))
    assert reine.chemin_photo is None

    assert pizzaiolo.ajouter_photo(reine, str(image))
    assert reine.chemin_photo == str(image)

    assert not pizzaiolo.ajouter_photo(Pizza("Inconnue", TypePizza.VIANDE), str(image))


def test_ajouter_photo_fichier_absent(
    pizzaiolo: ServicePizzaiolo,
    catalogue: dict[str, Pizza],
    tmp_path: Path,
) -> None:
    with pytest.raises(OSError):
        pizzaiolo.ajouter_photo(catalogue["Reine"], str(tmp_path / "absent.jpg"))


# ─────────────────────────────────────────────────────────────
# Prix
# ─────────────────────────────────────────────────────────────


def test_prix_minimal_et_prix_par_defaut(pizzaiolo: ServicePizzaiolo, catalogue: dict[str, Pizza]) -> None:
    reine = catalogue["Reine"]

    assert pizzaiolo.calculer_prix_minimal_pizza(reine) == 20.0
    assert pizzaiolo.prix_pizza(reine) == 20.0
    # Le calcul ne modifie pas le prix de vente
    assert reine.prix_vente == 0.0


def test_fixer_prix_pizza(pizzaiolo: ServicePizzaiolo, catalogue: dict[str, Pizza]) -> None:
    reine = catalogue["Reine"]

    assert not pizzaiolo.fixer_prix_pizza(reine, 19.99)
    assert pizzaiolo.prix_pizza(reine) == 20.0

    assert pizzaiolo.fixer_prix_pizza(reine, 24.5)
    assert pizzaiolo.prix_pizza(reine) == 24.5


def test_prix_pizza_invalide(pizzaiolo: ServicePizzaiolo, catalogue: dict[str, Pizza]) -> None:
    copie = Pizza("Reine", TypePizza.VIANDE)
    assert pizzaiolo.prix_pizza(copie) == -1
    assert pizzaiolo.calculer_prix_minimal_pizza(copie) == -1
    assert not pizzaiolo.fixer_prix_pizza(copie, 100.0)


def test_prix_minimal_suit_le_prix_des_ingredients(
    pizzaiolo: ServicePizzaiolo,
    catalogue: dict[str, Pizza],
) -> None:
    margarita = catalogue["Margarita"]
    assert pizzaiolo.calculer_prix_minimal_pizza(margarita) == 10.0

    # 8.0 + 2.0 = 10 -> 14 -> 20
    pizzaiolo.changer_prix_ingredient("tomate", 8.0)
    assert pizzaiolo.calculer_prix_minimal_pizza(margarita) == 20.0


# ─────────────────────────────────────────────────────────────
# Commandes et statistiques
# ─────────────────────────────────────────────────────────────


@pytest.fixture
def ventes(
    pizzaiolo: ServicePizzaiolo,
    client_connecte: ServiceClient,
    catalogue: dict[str, Pizza],
) -> list[Commande]:
    """Deux commandes validées : 2 Reine (bénéfice 5 l’unité) et 1 Margarita (bénéfice 2)."""

    assert pizzaiolo.fixer_prix_pizza(catalogue["Reine"], 25.0)
    assert pizzaiolo.fixer_prix_pizza(catalogue["Margarita"], 12.0)

    commandes = []
    for nom, nombre in [("Reine", 2), ("Margarita", 1)]:
        commande = client_connecte.debuter_commande()
        client_connecte.ajouter_pizza(catalogue[nom], nombre, commande)
        client_connecte.valider_commande(commande)
        commandes.append(commande)

    # Commande en cours : ignorée par les statistiques
    en_cours = client_connecte.debuter_commande()
    client_connecte.ajouter_pizza(catalogue["Savoyarde"], 4, en_cours)

    return commandes


def test_commandes_non_traitees_deviennent_traitees(
    pizzaiolo: ServicePizzaiolo,
    ventes: list[Commande],
) -> None:
    assert pizzaiolo.commandes_deja_traitees() == []

    a_traiter = pizzaiolo.commandes_non_traitees()
    assert a_traiter == ventes
    assert all(c.etat == EtatCommande.TRAITEE for c in a_traiter)

    assert pizzaiolo.commandes_non_traitees() == []
    assert pizzaiolo.commandes_deja_traitees() == ventes


def test_commandes_traitees_client(
    pizzaiolo: ServicePizzaiolo,
    ventes: list[Commande],
    info_luke: InformationPersonnelle,
) -> None:
    assert pizzaiolo.commandes_traitees_client(info_luke) == []

    pizzaiolo.commandes_non_traitees()
    assert pizzaiolo.commandes_traitees_client(info_luke) == ventes
    assert pizzaiolo.commandes_traitees_client(InformationPersonnelle("Solo", "Han")) is None


def test_ensemble_clients(
    pizzaiolo: ServicePizzaiolo,
    client_connecte: ServiceClient,
    info_luke: InformationPersonnelle,
) -> None:
    assert pizzaiolo.ensemble_clients() == {info_luke}


def test_benefices(
    pizzaiolo: ServicePizzaiolo,
    ventes: list[Commande],
    catalogue: dict[str, Pizza],
    info_luke: InformationPersonnelle,
) -> None:
    assert pizzaiolo.benefice_par_pizza() == {
        catalogue["Reine"]: 5.0,
        catalogue["Margarita"]: 2.0,
        catalogue["Savoyarde"]: 0.0,
    }
    assert pizzaiolo.benefice_commande(ventes[0]) == 10.0
    assert pizzaiolo.benefice_commande(Commande("x@y.fr", catalogue["Reine"], 1)) == -1

    # Rien n’est encore traité
    assert pizzaiolo.benefice_toutes_commandes() == 0.0

    pizzaiolo.commandes_non_traitees()
    assert pizzaiolo.benefice_toutes_commandes() == 12.0
    assert pizzaiolo.benefice_par_client() == {info_luke: 12.0}


def test_nombre_pizzas_commandees(
    pizzaiolo: ServicePizzaiolo,
    ventes: list[Commande],
    catalogue: dict[str, Pizza],
    info_luke: InformationPersonnelle,
) -> None:
    pizzaiolo.commandes_non_traitees()

    assert pizzaiolo.nombre_pizzas_commandees(catalogue["Reine"]) == 2
    assert pizzaiolo.nombre_pizzas_commandees(catalogue["Savoyarde"]) == 0
    assert pizzaiolo.nombre_pizzas_commandees(Pizza("Inconnue", TypePizza.VIANDE)) == -1
    assert pizzaiolo.nombre_pizzas_commandees_par_client() == {info_luke: 3}


def test_classement_pizzas(
    pizzaiolo: ServicePizzaiolo,
    ventes: list[Commande],
    catalogue: dict[str, Pizza],
) -> None:
    pizzaiolo.commandes_non_traitees()

    classement = pizzaiolo.classement_pizzas_par_nombre_commandes()
    assert [p.nom for p in classement] == ["Reine", "Margarita", "Savoyarde"]


def test_statistiques_clients_sans_commande(
    pizzaiolo: ServicePizzaiolo,
    client_connecte: ServiceClient,
    info_luke: InformationPersonnelle,
) -> None:
    assert pizzaiolo.nombre_pizzas_commandees_par_client() == {info_luke: 0}
    assert pizzaiolo.benefice_par_client() == {info_luke: 0.0}
