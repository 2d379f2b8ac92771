"""Tables SQLAlchemy du fichier de sauvegarde.

On ne met aucune logique métier ici : uniquement la structure des tables.
Les objets du domaine restent de simples objets Python ; la conversion est
faite par `ServiceSauvegarde`.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from pizzeria.domaine.enums.types import EtatCommande, TypePizza


class BaseModele(DeclarativeBase):
    """Base declarative SQLAlchemy."""


class ClientTable(BaseModele):
    __tablename__ = "client"

    email: Mapped[str] = mapped_column(String(320), primary_key=True)
    mot_de_passe_hash: Mapped[str] = mapped_column(String(300), nullable=False)
    nom: Mapped[str] = mapped_column(String(200), nullable=False)
    prenom: Mapped[str] = mapped_column(String(200), nullable=False)
    adresse: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class IngredientTable(BaseModele):
    __tablename__ = "ingredient"

    nom: Mapped[str] = mapped_column(String(200), primary_key=True)
    prix: Mapped[float] = mapped_column(Float, nullable=False)


class InterdictionTable(BaseModele):
    __tablename__ = "interdiction"

    ingredient: Mapped[str] = mapped_column(String(200), ForeignKey("ingredient.nom"), primary_key=True)
    type_pizza: Mapped[TypePizza] = mapped_column(
        Enum(TypePizza, name="type_pizza", native_enum=False, length=50),
        primary_key=True,
    )


class PizzaTable(BaseModele):
    __tablename__ = "pizza"

    nom: Mapped[str] = mapped_column(String(200), primary_key=True)
    type_pizza: Mapped[TypePizza] = mapped_column(
        Enum(TypePizza, name="type_pizza", native_enum=False, length=50),
        nullable=False,
    )
    prix_vente: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    chemin_photo: Mapped[str | None] = mapped_column(String(1000), nullable=True)


class LigneIngredientPizzaTable(BaseModele):
    """Ingrédient d’une pizza ; `position` conserve l’ordre de la liste."""

    __tablename__ = "ligne_ingredient_pizza"

    pizza_nom: Mapped[str] = mapped_column(String(200), ForeignKey("pizza.nom"), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    ingredient: Mapped[str] = mapped_column(String(200), nullable=False)


class EvaluationTable(BaseModele):
    __tablename__ = "evaluation"

    pizza_nom: Mapped[str] = mapped_column(String(200), ForeignKey("pizza.nom"), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    note: Mapped[int] = mapped_column(Integer, nullable=False)
    commentaire: Mapped[str] = mapped_column(String(2000), nullable=False, default="")


class EvaluationClientTable(BaseModele):
    """Trace des clients ayant déjà évalué une pizza."""

    __tablename__ = "evaluation_client"

    email: Mapped[str] = mapped_column(String(320), primary_key=True)
    pizza_nom: Mapped[str] = mapped_column(String(200), primary_key=True)


class CommandeTable(BaseModele):
    __tablename__ = "commande"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email_client: Mapped[str] = mapped_column(String(320), nullable=False)
    pizza_nom: Mapped[str | None] = mapped_column(String(200), ForeignKey("pizza.nom"), nullable=True)
    quantite: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    etat: Mapped[EtatCommande] = mapped_column(
        Enum(EtatCommande, name="etat_commande", native_enum=False, length=50),
        nullable=False,
        default=EtatCommande.CREEE,
    )
    date_heure: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
