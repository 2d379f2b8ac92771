from __future__ import annotations

NOTE_MIN = 0
NOTE_MAX = 5


class Evaluation:
    """Évaluation d’une pizza par un client : une note de 0 à 5 et un commentaire.

    À la construction, la note est ramenée dans [0, 5].
    Le setter, lui, refuse une note hors bornes (la note reste inchangée).
    """

    def __init__(self, note: int, commentaire: str | None = "") -> None:
        self._note = min(max(note, NOTE_MIN), NOTE_MAX)
        self._commentaire = commentaire if commentaire is not None else ""

    @property
    def note(self) -> int:
        return self._note

    @note.setter
    def note(self, note: int) -> None:
        if NOTE_MIN <= note <= NOTE_MAX:
            self._note = note

    @property
    def commentaire(self) -> str:
        return self._commentaire

    @commentaire.setter
    def commentaire(self, commentaire: str | None) -> None:
        if commentaire is not None:
            self._commentaire = commentaire

    def est_positive(self) -> bool:
        return self._note >= 4

    def __str__(self) -> str:
        if not self._commentaire:
            return f"Note : {self._note}/5"
        return f'Note : {self._note}/5 - "{self._commentaire}"'

    def __repr__(self) -> str:
        return f"Evaluation(note={self._note!r}, commentaire={self._commentaire!r})"
