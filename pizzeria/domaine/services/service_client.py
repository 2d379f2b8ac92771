from __future__ import annotations

import logging

from email_validator import EmailNotValidError, validate_email

from pizzeria.core.securite import hasher_mot_de_passe, verifier_mot_de_passe
from pizzeria.domaine.donnees import CompteClient, DonneesPizzeria
from pizzeria.domaine.enums.types import EtatCommande, TypePizza
from pizzeria.domaine.erreurs import ErreurCommande, ErreurNonConnecte
from pizzeria.domaine.modeles import Commande, Evaluation, InformationPersonnelle, Pizza
from pizzeria.domaine.services.contrats import ContratClient
from pizzeria.domaine.services.filtres import Filtre, FiltreIngredients, FiltrePrixMaximum, FiltreType
from pizzeria.domaine.services.tarification import calculer_prix_effectif


logger = logging.getLogger(__name__)

INSCRIPTION_OK = 0
INSCRIPTION_EMAIL_EXISTANT = -1
INSCRIPTION_IDENTIFIANTS_VIDES = -2
INSCRIPTION_INFORMATIONS_INVALIDES = -3
INSCRIPTION_EMAIL_MAL_FORME = -4


def _email_bien_forme(email: str) -> bool:
    # Syntaxe seule : pas de résolution DNS du domaine.
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class ServiceClient(ContratClient):
    """Service d’un client (un terminal = une instance).

    - La "session" est l’email du client connecté, conservé par l’instance.
    - Les filtres du catalogue sont propres à l’instance.
    - Les données (pizzas, commandes, comptes) sont partagées via `DonneesPizzeria`.
    """

    def __init__(self, donnees: DonneesPizzeria) -> None:
        self._donnees = donnees
        self._email_connecte: str | None = None
        self._filtres: list[Filtre] = []

    @property
    def email_connecte(self) -> str | None:
        return self._email_connecte

    # ------------------------------------------------------------------
    # Compte et session
    # ------------------------------------------------------------------

    def inscription(self, email: str, mot_de_passe: str, informations: InformationPersonnelle) -> int:
        if not email or not email.strip() or not mot_de_passe:
            return INSCRIPTION_IDENTIFIANTS_VIDES
        if informations is None or not informations.nom or not informations.prenom:
            return INSCRIPTION_INFORMATIONS_INVALIDES
        if not _email_bien_forme(email):
            return INSCRIPTION_EMAIL_MAL_FORME
        if email in self._donnees.clients:
            return INSCRIPTION_EMAIL_EXISTANT

        self._donnees.clients[email] = CompteClient(
            email=email,
            mot_de_passe_hash=hasher_mot_de_passe(mot_de_passe),
            informations=informations,
        )
        logger.info("client_inscrit email=%s", email)
        return INSCRIPTION_OK

    def connexion(self, email: str, mot_de_passe: str) -> bool:
        compte = self._donnees.clients.get(email) if email else None
        if compte is None or not mot_de_passe:
            return False
        if not verifier_mot_de_passe(mot_de_passe, compte.mot_de_passe_hash):
            logger.info("connexion_refusee email=%s", email)
            return False

        self._email_connecte = email
        return True

    def deconnexion(self) -> None:
        self._exiger_connexion()
        self._email_connecte = None

    # ------------------------------------------------------------------
    # Commandes
    # ------------------------------------------------------------------

    def debuter_commande(self) -> Commande:
        email = self._exiger_connexion()
        commande = Commande(email, None, 0)
        self._donnees.commandes.append(commande)
        return commande

    def ajouter_pizza(self, pizza: Pizza, nombre: int, commande: Commande) -> None:
        self._verifier_commande_en_cours(commande)
        if not self._donnees.pizza_valide(pizza):
            raise ErreurCommande("Pizza introuvable.")
        if nombre is None or nombre <= 0:
            raise ErreurCommande("Le nombre de pizzas doit être > 0.")
        if commande.pizza is not None and commande.pizza is not pizza:
            raise ErreurCommande("Une commande ne porte que sur une seule pizza.")

        commande.pizza = pizza
        commande.quantite += nombre

    def valider_commande(self, commande: Commande) -> None:
        self._verifier_commande_en_cours(commande)
        if commande.pizza is None or commande.quantite <= 0:
            raise ErreurCommande("La commande ne contient aucune pizza.")

        commande.etat = EtatCommande.VALIDEE
        logger.info(
            "commande_validee email=%s pizza=%s quantite=%s",
            commande.email_client,
            commande.pizza.nom,
            commande.quantite,
        )

    def annuler_commande(self, commande: Commande) -> None:
        self._verifier_commande_en_cours(commande)
        self._donnees.commandes = [c for c in self._donnees.commandes if c is not commande]

    def commandes_en_cours(self) -> list[Commande]:
        email = self._exiger_connexion()
        return self._commandes_client(email, {EtatCommande.CREEE})

    def commandes_passees(self) -> list[Commande]:
        email = self._exiger_connexion()
        return self._commandes_client(email, {EtatCommande.VALIDEE, EtatCommande.TRAITEE})

    # ------------------------------------------------------------------
    # Catalogue et filtres
    # ------------------------------------------------------------------

    def pizzas(self) -> set[Pizza]:
        return set(self._donnees.pizzas.values())

    def ajouter_filtre_type(self, type_pizza: TypePizza) -> None:
        if type_pizza is not None:
            self._filtres.append(FiltreType(type_pizza))

    def ajouter_filtre_ingredients(self, *ingredients: str) -> None:
        # Les ingrédients inconnus sont ignorés.
        connus = frozenset(i for i in ingredients if i and i in self._donnees.ingredients)
        if connus:
            self._filtres.append(FiltreIngredients(connus))

    def ajouter_filtre_prix_maximum(self, prix_maximum: float) -> None:
        if prix_maximum is not None and prix_maximum > 0:
            self._filtres.append(FiltrePrixMaximum(float(prix_maximum)))

    def selection_pizzas_filtres(self) -> set[Pizza]:
        selection: set[Pizza] = set()
        for pizza in self._donnees.pizzas.values():
            prix = calculer_prix_effectif(pizza, self._donnees.ingredients)
            if all(f.accepte(pizza, prix) for f in self._filtres):
                selection.add(pizza)
        return selection

    def supprimer_filtres(self) -> None:
        self._filtres.clear()

    # ------------------------------------------------------------------
    # Évaluations
    # ------------------------------------------------------------------

    def evaluations_pizza(self, pizza: Pizza) -> list[Evaluation] | None:
        if not self._donnees.pizza_valide(pizza):
            return None
        return list(pizza.evaluations)

    def note_moyenne(self, pizza: Pizza) -> float:
        if not self._donnees.pizza_valide(pizza):
            return -2
        if not pizza.evaluations:
            return -1
        return sum(e.note for e in pizza.evaluations) / len(pizza.evaluations)

    def ajouter_evaluation(self, pizza: Pizza, note: int, commentaire: str | None) -> bool:
        email = self._exiger_connexion()
        if not self._donnees.pizza_valide(pizza):
            return False
        if note is None or not 0 <= note <= 5:
            return False

        deja_commandee = any(
            c.pizza is pizza for c in self._commandes_client(email, {EtatCommande.VALIDEE, EtatCommande.TRAITEE})
        )
        if not deja_commandee:
            raise ErreurCommande("Le client n’a jamais commandé cette pizza.")

        cle = (email, pizza.nom)
        if cle in self._donnees.evaluations_clients:
            return False

        pizza.ajouter_evaluation(Evaluation(note, commentaire))
        self._donnees.evaluations_clients.add(cle)
        logger.info("evaluation_ajoutee email=%s pizza=%s note=%s", email, pizza.nom, note)
        return True

    # ------------------------------------------------------------------
    # Outils internes
    # ------------------------------------------------------------------

    def _exiger_connexion(self) -> str:
        if self._email_connecte is None:
            raise ErreurNonConnecte("Aucun client n’est connecté.")
        return self._email_connecte

    def _verifier_commande_en_cours(self, commande: Commande) -> None:
        email = self._exiger_connexion()
        if not self._donnees.commande_valide(commande):
            raise ErreurCommande("Commande introuvable.")
        if commande.email_client != email:
            raise ErreurCommande("La commande n’appartient pas au client connecté.")
        if commande.etat != EtatCommande.CREEE:
            raise ErreurCommande("La commande n’est pas en cours.")

    def _commandes_client(self, email: str, etats: set[EtatCommande]) -> list[Commande]:
        commandes = [c for c in self._donnees.commandes if c.email_client == email and c.etat in etats]
        return sorted(commandes, key=lambda c: c.date_heure)
