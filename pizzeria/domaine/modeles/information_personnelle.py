from __future__ import annotations


class InformationPersonnelle:
    """Informations personnelles d’un client : identité, âge et adresse.

    - `nom` et `prenom` ne sont pas modifiables.
    - `age` vaut 0 tant qu’il n’est pas défini ; seule une valeur > 0 est acceptée.
    - `adresse` vaut "" tant qu’elle n’est pas définie ; `None` est ignoré.
    """

    def __init__(self, nom: str, prenom: str, adresse: str | None = "", age: int = 0) -> None:
        self._nom = nom
        self._prenom = prenom
        self._adresse = adresse if adresse is not None else ""
        self._age = age if age > 0 else 0

    @property
    def nom(self) -> str:
        return self._nom

    @property
    def prenom(self) -> str:
        return self._prenom

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, age: int) -> None:
        if age > 0:
            self._age = age

    @property
    def adresse(self) -> str:
        return self._adresse

    @adresse.setter
    def adresse(self, adresse: str | None) -> None:
        if adresse is not None:
            self._adresse = adresse

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._adresse == other._adresse
            and self._age == other._age
            and self._nom == other._nom
            and self._prenom == other._prenom
        )

    def __hash__(self) -> int:
        return hash((self._adresse, self._age, self._nom, self._prenom))

    def __str__(self) -> str:
        return f"{self._prenom} {self._nom} d'age {self._age} ans, habite {self._adresse}"

    def __repr__(self) -> str:
        return f"InformationPersonnelle(nom={self._nom!r}, prenom={self._prenom!r})"
