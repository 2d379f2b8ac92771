from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from pizzeria.domaine.donnees import DonneesPizzeria
from pizzeria.domaine.enums.types import TypePizza
from pizzeria.domaine.modeles import InformationPersonnelle, Pizza
from pizzeria.domaine.services.service_client import ServiceClient
from pizzeria.domaine.services.service_pizzaiolo import ServicePizzaiolo
from pizzeria.main import creer_application

from tests._helpers import EMAIL_LUKE, MDP_LUKE


@pytest.fixture
def donnees() -> DonneesPizzeria:
    """Données vierges, isolées par test."""

    return DonneesPizzeria()


@pytest.fixture
def pizzaiolo(donnees: DonneesPizzeria) -> ServicePizzaiolo:
    return ServicePizzaiolo(donnees)


@pytest.fixture
def catalogue(pizzaiolo: ServicePizzaiolo) -> dict[str, Pizza]:
    """Ingrédients + trois pizzas.

    Prix minimaux (somme * 1.4, arrondi à la dizaine supérieure) :
    - Reine : 7.5 -> 10.5 -> 20
    - Margarita : 3.0 -> 4.2 -> 10
    - Savoyarde : 6.5 -> 9.1 -> 10
    """

    for nom, prix in [
        ("tomate", 1.0),
        ("mozzarella", 2.0),
        ("jambon", 3.0),
        ("champignon", 1.5),
        ("reblochon", 4.0),
        ("lardons", 2.5),
    ]:
        assert pizzaiolo.creer_ingredient(nom, prix) == 0

    assert pizzaiolo.interdire_ingredient("jambon", TypePizza.VEGETARIENNE)
    assert pizzaiolo.interdire_ingredient("lardons", TypePizza.VEGETARIENNE)

    compositions = {
        "Reine": (TypePizza.VIANDE, ["tomate", "mozzarella", "jambon", "champignon"]),
        "Margarita": (TypePizza.VEGETARIENNE, ["tomate", "mozzarella"]),
        "Savoyarde": (TypePizza.REGIONALE, ["reblochon", "lardons"]),
    }

    pizzas: dict[str, Pizza] = {}
    for nom, (type_pizza, ingredients) in compositions.items():
        pizza = pizzaiolo.creer_pizza(nom, type_pizza)
        assert pizza is not None
        for ingredient in ingredients:
            assert pizzaiolo.ajouter_ingredient_pizza(pizza, ingredient) == 0
        pizzas[nom] = pizza

    return pizzas


@pytest.fixture
def client(donnees: DonneesPizzeria) -> ServiceClient:
    return ServiceClient(donnees)


@pytest.fixture
def info_luke() -> InformationPersonnelle:
    return InformationPersonnelle("Skywalker", "Luke", "Planète Tatooine", 20)


@pytest.fixture
def client_connecte(client: ServiceClient, info_luke: InformationPersonnelle) -> ServiceClient:
    assert client.inscription(EMAIL_LUKE, MDP_LUKE, info_luke) == 0
    assert client.connexion(EMAIL_LUKE, MDP_LUKE)
    return client


@pytest_asyncio.fixture
async def client_api(donnees: DonneesPizzeria) -> AsyncIterator[httpx.AsyncClient]:
    """Client HTTP sur une application isolée (données du test)."""

    application = creer_application(donnees)
    transport = httpx.ASGITransport(app=application)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
