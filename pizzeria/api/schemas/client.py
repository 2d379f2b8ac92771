from __future__ import annotations

from pydantic import BaseModel, Field

from pizzeria.domaine.enums.types import TypePizza


class PizzaClientSchema(BaseModel):
    """Représentation d’une pizza côté API client."""

    nom: str
    type_pizza: TypePizza
    ingredients: list[str]
    prix: float
    chemin_photo: str | None = None


class EvaluationSchema(BaseModel):
    note: int
    commentaire: str


class EvaluationsPizzaSchema(BaseModel):
    pizza: str
    evaluations: list[EvaluationSchema]
    # -1 si aucune évaluation
    note_moyenne: float


class RequeteInscription(BaseModel):
    email: str
    mot_de_passe: str
    nom: str
    prenom: str
    adresse: str = ""
    age: int = Field(default=0, ge=0)


class ReponseInscription(BaseModel):
    email: str
    code: int
