from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pizzeria.api.dependances import fournir_donnees, fournir_service_client
from pizzeria.api.schemas.client import (
    EvaluationSchema,
    EvaluationsPizzaSchema,
    PizzaClientSchema,
    ReponseInscription,
    RequeteInscription,
)
from pizzeria.domaine.donnees import DonneesPizzeria
from pizzeria.domaine.enums.types import TypePizza
from pizzeria.domaine.modeles import InformationPersonnelle
from pizzeria.domaine.services.service_client import (
    INSCRIPTION_EMAIL_EXISTANT,
    INSCRIPTION_OK,
    ServiceClient,
)
from pizzeria.domaine.services.tarification import calculer_prix_effectif


logger = logging.getLogger(__name__)


routeur_client = APIRouter(prefix="/api/client", tags=["client"])


_MESSAGES_INSCRIPTION = {
    -2: "Email ou mot de passe vide.",
    -3: "Informations personnelles incomplètes.",
    -4: "Adresse email mal formée.",
}


@routeur_client.get("/pizzas", response_model=list[PizzaClientSchema])
async def lister_pizzas(
    type_pizza: TypePizza | None = Query(default=None),
    ingredients: list[str] | None = Query(default=None),
    prix_maximum: float | None = Query(default=None),
    service: ServiceClient = Depends(fournir_service_client),
    donnees: DonneesPizzeria = Depends(fournir_donnees),
) -> list[PizzaClientSchema]:
    """Catalogue filtré, trié par nom.

    Les filtres invalides (ingrédient inconnu, prix <= 0) sont ignorés.
    """

    if type_pizza is not None:
        service.ajouter_filtre_type(type_pizza)
    if ingredients:
        service.ajouter_filtre_ingredients(*ingredients)
    if prix_maximum is not None:
        service.ajouter_filtre_prix_maximum(prix_maximum)

    pizzas = sorted(service.selection_pizzas_filtres(), key=lambda p: p.nom)
    return [
        PizzaClientSchema(
            nom=p.nom,
            type_pizza=p.type_pizza,
            ingredients=list(p.ingredients),
            prix=calculer_prix_effectif(p, donnees.ingredients),
            chemin_photo=p.chemin_photo,
        )
        for p in pizzas
    ]


@routeur_client.get("/pizzas/{nom}/evaluations", response_model=EvaluationsPizzaSchema)
async def lister_evaluations(
    nom: str,
    service: ServiceClient = Depends(fournir_service_client),
    donnees: DonneesPizzeria = Depends(fournir_donnees),
) -> EvaluationsPizzaSchema:
    pizza = donnees.pizzas.get(nom)
    evaluations = service.evaluations_pizza(pizza) if pizza is not None else None
    if evaluations is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pizza introuvable.")

    return EvaluationsPizzaSchema(
        pizza=nom,
        evaluations=[EvaluationSchema(note=e.note, commentaire=e.commentaire) for e in evaluations],
        note_moyenne=service.note_moyenne(pizza),
    )


@routeur_client.post(
    "/inscription",
    response_model=ReponseInscription,
    status_code=status.HTTP_201_CREATED,
)
async def inscrire_client(
    body: RequeteInscription,
    service: ServiceClient = Depends(fournir_service_client),
) -> ReponseInscription:
    informations = InformationPersonnelle(body.nom, body.prenom, body.adresse, body.age)
    code = service.inscription(body.email, body.mot_de_passe, informations)

    if code == INSCRIPTION_EMAIL_EXISTANT:
        logger.info("inscription_conflit email=%s", body.email)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Conflit: un client avec cet email existe déjà.",
        )
    if code != INSCRIPTION_OK:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=_MESSAGES_INSCRIPTION.get(code, "Inscription refusée."),
        )

    return ReponseInscription(email=body.email, code=code)
