from __future__ import annotations

from pydantic import BaseModel, Field

from pizzeria.domaine.enums.types import EtatCommande, TypePizza


class IngredientCreate(BaseModel):
    nom: str = Field(..., min_length=1, max_length=200)
    prix: float = Field(..., gt=0)


class IngredientPrixUpdate(BaseModel):
    prix: float = Field(..., gt=0)


class InterdictionCreate(BaseModel):
    type_pizza: TypePizza


class PizzaCreate(BaseModel):
    nom: str = Field(..., min_length=1, max_length=200)
    type_pizza: TypePizza


class IngredientPizzaAjout(BaseModel):
    ingredient: str = Field(..., min_length=1)


class PrixPizzaUpdate(BaseModel):
    prix: float = Field(..., gt=0)


class PizzaOut(BaseModel):
    nom: str
    type_pizza: TypePizza
    ingredients: list[str]
    prix_vente: float
    prix_minimal: float
    ingredients_interdits: list[str] = []


class PrixPizzaOut(BaseModel):
    pizza: str
    prix: float
    prix_minimal: float


class CommandeOut(BaseModel):
    email_client: str
    pizza: str | None
    quantite: int
    etat: EtatCommande
    date_heure: str


class StatistiquePizza(BaseModel):
    pizza: str
    nombre_commandees: int
    benefice_unitaire: float


class StatistiqueClient(BaseModel):
    client: str
    nombre_pizzas: int
    benefice: float


class StatistiquesOut(BaseModel):
    benefice_total: float
    classement: list[StatistiquePizza]
    clients: list[StatistiqueClient]


class RequeteFichier(BaseModel):
    nom_fichier: str | None = None
