from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pizzeria.core.base_donnees import creer_fabrique_session, creer_moteur_async
from pizzeria.domaine.donnees import CompteClient, DonneesPizzeria
from pizzeria.domaine.modeles import Commande, Evaluation, InformationPersonnelle, Pizza
from pizzeria.domaine.services.contrats import ContratSauvegarde
from pizzeria.persistance.tables import (
    BaseModele,
    ClientTable,
    CommandeTable,
    EvaluationClientTable,
    EvaluationTable,
    IngredientTable,
    InterdictionTable,
    LigneIngredientPizzaTable,
    PizzaTable,
)


logger = logging.getLogger(__name__)


class ErreurSauvegarde(OSError):
    """Échec de lecture/écriture du fichier de sauvegarde."""


def _en_utc(date_heure: datetime) -> datetime:
    if date_heure.tzinfo is None:
        return date_heure
    return date_heure.astimezone(timezone.utc)


class ServiceSauvegarde(ContratSauvegarde):
    """Sauvegarde toutes les données dans un fichier SQLite (SQLAlchemy async).

    - La sauvegarde écrase le contenu précédent du fichier.
    - Le chargement remplace les données en place : les services qui partagent
      `DonneesPizzeria` voient immédiatement les données chargées.
    """

    def __init__(self, donnees: DonneesPizzeria) -> None:
        self._donnees = donnees

    async def sauvegarder_donnees(self, nom_fichier: str) -> None:
        # Écriture dans un fichier temporaire : une sauvegarde ratée laisse
        # la précédente intacte.
        chemin = Path(nom_fichier)
        temporaire = chemin.with_name(chemin.name + ".tmp")
        temporaire.unlink(missing_ok=True)

        try:
            await self._ecrire_fichier(str(temporaire))
        except SQLAlchemyError as e:
            temporaire.unlink(missing_ok=True)
            raise ErreurSauvegarde(f"Sauvegarde impossible dans {nom_fichier}: {e}") from e

        os.replace(temporaire, chemin)
        logger.info(
            "donnees_sauvegardees fichier=%s pizzas=%s commandes=%s",
            nom_fichier,
            len(self._donnees.pizzas),
            len(self._donnees.commandes),
        )

    async def charger_donnees(self, nom_fichier: str) -> None:
        if not Path(nom_fichier).is_file():
            raise FileNotFoundError(nom_fichier)

        moteur = creer_moteur_async(nom_fichier)
        try:
            fabrique = creer_fabrique_session(moteur)
            async with fabrique() as session:
                chargees = await self._lire_donnees(session)
        except SQLAlchemyError as e:
            raise ErreurSauvegarde(f"Chargement impossible depuis {nom_fichier}: {e}") from e
        finally:
            await moteur.dispose()

        self._donnees.remplacer_par(chargees)
        logger.info(
            "donnees_chargees fichier=%s pizzas=%s commandes=%s",
            nom_fichier,
            len(chargees.pizzas),
            len(chargees.commandes),
        )

    async def _ecrire_fichier(self, nom_fichier: str) -> None:
        moteur = creer_moteur_async(nom_fichier)
        try:
            async with moteur.begin() as connexion:
                await connexion.run_sync(BaseModele.metadata.create_all)

            fabrique = creer_fabrique_session(moteur)
            async with fabrique() as session:
                async with session.begin():
                    session.add_all(self._lignes_a_sauvegarder())
        finally:
            await moteur.dispose()

    def _lignes_a_sauvegarder(self) -> list[BaseModele]:
        d = self._donnees
        lignes: list[BaseModele] = []

        for compte in d.clients.values():
            info = compte.informations
            lignes.append(
                ClientTable(
                    email=compte.email,
                    mot_de_passe_hash=compte.mot_de_passe_hash,
                    nom=info.nom,
                    prenom=info.prenom,
                    adresse=info.adresse,
                    age=info.age,
                )
            )

        lignes.extend(IngredientTable(nom=nom, prix=prix) for nom, prix in d.ingredients.items())

        for type_pizza, ingredients in d.interdictions.items():
            lignes.extend(InterdictionTable(ingredient=i, type_pizza=type_pizza) for i in ingredients)

        for pizza in d.pizzas.values():
            lignes.append(
                PizzaTable(
                    nom=pizza.nom,
                    type_pizza=pizza.type_pizza,
                    prix_vente=pizza.prix_vente,
                    chemin_photo=pizza.chemin_photo,
                )
            )
            lignes.extend(
                LigneIngredientPizzaTable(pizza_nom=pizza.nom, position=i, ingredient=ingredient)
                for i, ingredient in enumerate(pizza.ingredients)
            )
            lignes.extend(
                EvaluationTable(pizza_nom=pizza.nom, position=i, note=e.note, commentaire=e.commentaire)
                for i, e in enumerate(pizza.evaluations)
            )

        lignes.extend(EvaluationClientTable(email=email, pizza_nom=nom) for email, nom in d.evaluations_clients)

        lignes.extend(
            CommandeTable(
                email_client=c.email_client,
                pizza_nom=c.pizza.nom if c.pizza is not None else None,
                quantite=c.quantite,
                etat=c.etat,
                date_heure=_en_utc(c.date_heure),
            )
            for c in d.commandes
        )

        return lignes

    async def _lire_donnees(self, session: AsyncSession) -> DonneesPizzeria:
        donnees = DonneesPizzeria()

        for ligne in (await session.execute(select(ClientTable))).scalars():
            donnees.clients[ligne.email] = CompteClient(
                email=ligne.email,
                mot_de_passe_hash=ligne.mot_de_passe_hash,
                informations=InformationPersonnelle(ligne.nom, ligne.prenom, ligne.adresse, ligne.age),
            )

        for ligne in (await session.execute(select(IngredientTable))).scalars():
            donnees.ingredients[ligne.nom] = ligne.prix

        for ligne in (await session.execute(select(InterdictionTable))).scalars():
            donnees.interdictions.setdefault(ligne.type_pizza, set()).add(ligne.ingredient)

        for ligne in (await session.execute(select(PizzaTable).order_by(PizzaTable.nom))).scalars():
            pizza = Pizza(ligne.nom, ligne.type_pizza)
            pizza.prix_vente = ligne.prix_vente
            pizza.chemin_photo = ligne.chemin_photo
            donnees.pizzas[pizza.nom] = pizza

        res = await session.execute(
            select(LigneIngredientPizzaTable).order_by(
                LigneIngredientPizzaTable.pizza_nom, LigneIngredientPizzaTable.position
            )
        )
        for ligne in res.scalars():
            donnees.pizzas[ligne.pizza_nom].ajouter_ingredient(ligne.ingredient)

        res = await session.execute(select(EvaluationTable).order_by(EvaluationTable.pizza_nom, EvaluationTable.position))
        for ligne in res.scalars():
            donnees.pizzas[ligne.pizza_nom].ajouter_evaluation(Evaluation(ligne.note, ligne.commentaire))

        for ligne in (await session.execute(select(EvaluationClientTable))).scalars():
            donnees.evaluations_clients.add((ligne.email, ligne.pizza_nom))

        for ligne in (await session.execute(select(CommandeTable).order_by(CommandeTable.id))).scalars():
            date_heure = ligne.date_heure
            # SQLite ne conserve pas le fuseau : les dates sont sauvegardées en UTC.
            if date_heure.tzinfo is None:
                date_heure = date_heure.replace(tzinfo=timezone.utc)

            pizza = donnees.pizzas.get(ligne.pizza_nom) if ligne.pizza_nom else None
            commande = Commande(ligne.email_client, pizza, ligne.quantite, date_heure=date_heure)
            commande.etat = ligne.etat
            donnees.commandes.append(commande)

        return donnees
