from __future__ import annotations

from datetime import datetime, timezone

from pizzeria.domaine.enums.types import EtatCommande
from pizzeria.domaine.modeles.pizza import Pizza


class Commande:
    """Commande d’un client : une pizza en une certaine quantité.

    IMPORTANT :
    - Identité = (email_client, date_heure) : deux commandes d’un même client au
      même instant sont égales.
    - `etat` est modifiable librement : l’ordre CREEE -> VALIDEE -> TRAITEE est
      garanti par les services, pas par l’objet.
    - Une commande juste débutée n’a pas encore de pizza (pizza=None, quantite=0).
    """

    def __init__(
        self,
        email_client: str,
        pizza: Pizza | None,
        quantite: int,
        date_heure: datetime | None = None,
    ) -> None:
        self._email_client = email_client
        self.pizza = pizza
        self.quantite = quantite
        self.etat = EtatCommande.CREEE
        self._date_heure = date_heure if date_heure is not None else datetime.now(timezone.utc)

    @property
    def email_client(self) -> str:
        return self._email_client

    @property
    def date_heure(self) -> datetime:
        return self._date_heure

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Commande):
            return NotImplemented
        return self._email_client == other._email_client and self._date_heure == other._date_heure

    def __hash__(self) -> int:
        return hash((self._email_client, self._date_heure))

    def __str__(self) -> str:
        nom_pizza = self.pizza.nom if self.pizza is not None else "aucune"
        return (
            f"Commande[email={self._email_client}, pizza={nom_pizza}, "
            f"quantite={self.quantite}, etat={self.etat.value}]"
        )

    __repr__ = __str__
