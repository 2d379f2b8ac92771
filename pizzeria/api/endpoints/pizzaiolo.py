from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from pizzeria.api.dependances import (
    fournir_donnees,
    fournir_service_pizzaiolo,
    fournir_service_sauvegarde,
    verifier_acces_interne,
)
from pizzeria.api.schemas.pizzaiolo import (
    CommandeOut,
    IngredientCreate,
    IngredientPizzaAjout,
    IngredientPrixUpdate,
    InterdictionCreate,
    PizzaCreate,
    PizzaOut,
    PrixPizzaOut,
    PrixPizzaUpdate,
    RequeteFichier,
    StatistiqueClient,
    StatistiquePizza,
    StatistiquesOut,
)
from pizzeria.core.configuration import parametres_application
from pizzeria.domaine.donnees import DonneesPizzeria
from pizzeria.domaine.modeles import Commande, Pizza
from pizzeria.domaine.services.service_pizzaiolo import ServicePizzaiolo
from pizzeria.persistance.sauvegarde import ServiceSauvegarde


logger = logging.getLogger(__name__)


routeur_pizzaiolo_interne = APIRouter(
    prefix="/api/interne",
    tags=["pizzaiolo_interne"],
    dependencies=[Depends(verifier_acces_interne)],
)


def _pizza_ou_404(donnees: DonneesPizzeria, nom: str) -> Pizza:
    pizza = donnees.pizzas.get(nom)
    if pizza is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pizza introuvable.")
    return pizza


def _pizza_out(service: ServicePizzaiolo, pizza: Pizza) -> PizzaOut:
    return PizzaOut(
        nom=pizza.nom,
        type_pizza=pizza.type_pizza,
        ingredients=list(pizza.ingredients),
        prix_vente=service.prix_pizza(pizza),
        prix_minimal=service.calculer_prix_minimal_pizza(pizza),
        ingredients_interdits=sorted(service.verifier_ingredients_pizza(pizza) or ()),
    )


def _commande_out(commande: Commande) -> CommandeOut:
    return CommandeOut(
        email_client=commande.email_client,
        pizza=commande.pizza.nom if commande.pizza is not None else None,
        quantite=commande.quantite,
        etat=commande.etat,
        date_heure=commande.date_heure.isoformat(),
    )


# ==============================
# Ingrédients
# ==============================


@routeur_pizzaiolo_interne.post("/ingredients", status_code=status.HTTP_201_CREATED)
async def creer_ingredient(
    body: IngredientCreate,
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
) -> dict[str, str | float]:
    code = service.creer_ingredient(body.nom.strip(), body.prix)
    if code == -2:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Conflit: un ingrédient avec ce nom existe déjà.",
        )
    if code != 0:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Ingrédient invalide.")
    return {"nom": body.nom.strip(), "prix": body.prix}


@routeur_pizzaiolo_interne.patch("/ingredients/{nom}")
async def changer_prix_ingredient(
    nom: str,
    body: IngredientPrixUpdate,
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
) -> dict[str, str | float]:
    code = service.changer_prix_ingredient(nom, body.prix)
    if code == -3:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingrédient introuvable.")
    if code != 0:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Prix invalide.")
    return {"nom": nom, "prix": body.prix}


@routeur_pizzaiolo_interne.post("/ingredients/{nom}/interdictions", status_code=status.HTTP_201_CREATED)
async def interdire_ingredient(
    nom: str,
    body: InterdictionCreate,
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
) -> dict[str, str]:
    if not service.interdire_ingredient(nom, body.type_pizza):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingrédient introuvable.")
    return {"ingredient": nom, "type_pizza": body.type_pizza.value}


# ==============================
# Pizzas
# ==============================


@routeur_pizzaiolo_interne.get("/pizzas", response_model=list[PizzaOut])
async def lister_pizzas(
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
) -> list[PizzaOut]:
    return [_pizza_out(service, p) for p in sorted(service.pizzas(), key=lambda p: p.nom)]


@routeur_pizzaiolo_interne.post("/pizzas", response_model=PizzaOut, status_code=status.HTTP_201_CREATED)
async def creer_pizza(
    body: PizzaCreate,
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
) -> PizzaOut:
    nom = body.nom.strip()
    if not nom:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Nom de pizza vide.")

    pizza = service.creer_pizza(nom, body.type_pizza)
    if pizza is None:
        logger.info("pizza_creation_conflit nom=%s", body.nom)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Conflit: une pizza avec ce nom existe déjà.",
        )
    return _pizza_out(service, pizza)


@routeur_pizzaiolo_interne.post("/pizzas/{nom}/ingredients", response_model=PizzaOut)
async def ajouter_ingredient_pizza(
    nom: str,
    body: IngredientPizzaAjout,
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
    donnees: DonneesPizzeria = Depends(fournir_donnees),
) -> PizzaOut:
    pizza = _pizza_ou_404(donnees, nom)
    code = service.ajouter_ingredient_pizza(pizza, body.ingredient)
    if code == -2:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingrédient introuvable.")
    if code == -3:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Ingrédient interdit pour ce type de pizza.",
        )
    return _pizza_out(service, pizza)


@routeur_pizzaiolo_interne.delete("/pizzas/{nom}/ingredients/{ingredient}", response_model=PizzaOut)
async def retirer_ingredient_pizza(
    nom: str,
    ingredient: str,
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
    donnees: DonneesPizzeria = Depends(fournir_donnees),
) -> PizzaOut:
    pizza = _pizza_ou_404(donnees, nom)
    if service.retirer_ingredient_pizza(pizza, ingredient) != 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingrédient absent de la pizza.")
    return _pizza_out(service, pizza)


@routeur_pizzaiolo_interne.get("/pizzas/{nom}/prix", response_model=PrixPizzaOut)
async def lire_prix_pizza(
    nom: str,
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
    donnees: DonneesPizzeria = Depends(fournir_donnees),
) -> PrixPizzaOut:
    pizza = _pizza_ou_404(donnees, nom)
    return PrixPizzaOut(
        pizza=nom,
        prix=service.prix_pizza(pizza),
        prix_minimal=service.calculer_prix_minimal_pizza(pizza),
    )


@routeur_pizzaiolo_interne.put("/pizzas/{nom}/prix", response_model=PrixPizzaOut)
async def fixer_prix_pizza(
    nom: str,
    body: PrixPizzaUpdate,
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
    donnees: DonneesPizzeria = Depends(fournir_donnees),
) -> PrixPizzaOut:
    pizza = _pizza_ou_404(donnees, nom)
    if not service.fixer_prix_pizza(pizza, body.prix):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Prix inférieur au prix minimal de la pizza.",
        )
    return PrixPizzaOut(
        pizza=nom,
        prix=service.prix_pizza(pizza),
        prix_minimal=service.calculer_prix_minimal_pizza(pizza),
    )


# ==============================
# Commandes et statistiques
# ==============================


@routeur_pizzaiolo_interne.post("/commandes/a-traiter", response_model=list[CommandeOut])
async def traiter_commandes(
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
) -> list[CommandeOut]:
    """Retourne les commandes validées ; elles passent à l’état TRAITEE."""

    return [_commande_out(c) for c in service.commandes_non_traitees()]


@routeur_pizzaiolo_interne.get("/commandes/traitees", response_model=list[CommandeOut])
async def lister_commandes_traitees(
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
) -> list[CommandeOut]:
    return [_commande_out(c) for c in service.commandes_deja_traitees()]


@routeur_pizzaiolo_interne.get("/statistiques", response_model=StatistiquesOut)
async def lire_statistiques(
    service: ServicePizzaiolo = Depends(fournir_service_pizzaiolo),
) -> StatistiquesOut:
    benefices = service.benefice_par_pizza()
    nombres = service.nombre_pizzas_commandees_par_client()
    benefices_clients = service.benefice_par_client()

    return StatistiquesOut(
        benefice_total=service.benefice_toutes_commandes(),
        classement=[
            StatistiquePizza(
                pizza=p.nom,
                nombre_commandees=service.nombre_pizzas_commandees(p),
                benefice_unitaire=benefices[p],
            )
            for p in service.classement_pizzas_par_nombre_commandes()
        ],
        clients=[
            StatistiqueClient(
                client=str(info),
                nombre_pizzas=nombre,
                benefice=benefices_clients.get(info, 0.0),
            )
            for info, nombre in nombres.items()
        ],
    )


# ==============================
# Sauvegarde
# ==============================


@routeur_pizzaiolo_interne.post("/sauvegarde")
async def sauvegarder(
    body: RequeteFichier,
    service: ServiceSauvegarde = Depends(fournir_service_sauvegarde),
) -> dict[str, str]:
    nom_fichier = body.nom_fichier or parametres_application.fichier_sauvegarde
    try:
        await service.sauvegarder_donnees(nom_fichier)
    except OSError as e:
        logger.warning("sauvegarde_echec fichier=%s erreur=%s", nom_fichier, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return {"fichier": nom_fichier}


@routeur_pizzaiolo_interne.post("/chargement")
async def charger(
    body: RequeteFichier,
    service: ServiceSauvegarde = Depends(fournir_service_sauvegarde),
) -> dict[str, str]:
    nom_fichier = body.nom_fichier or parametres_application.fichier_sauvegarde
    try:
        await service.charger_donnees(nom_fichier)
    except FileNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Fichier introuvable.") from e
    except OSError as e:
        logger.warning("chargement_echec fichier=%s erreur=%s", nom_fichier, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return {"fichier": nom_fichier}
