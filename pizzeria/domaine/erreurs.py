from __future__ import annotations


class ErreurNonConnecte(Exception):
    """L’opération exige un client connecté et aucun ne l’est."""


class ErreurCommande(Exception):
    """La commande fournie n’est pas valide pour l’opération demandée."""
