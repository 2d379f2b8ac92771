from __future__ import annotations

import logging

from pizzeria.core.configuration import parametres_application


# aiosqlite trace chaque requête en DEBUG
_LOGGERS_BAVARDS = ("aiosqlite",)


def configurer_logging(niveau: str | None = None) -> None:
    """Logs clé=valeur sur stdout, préfixés par `app=pizzeria`.

    Le niveau vient de l’argument, sinon du paramètre `niveau_log` (LOG_LEVEL).
    Appels répétés : seul le niveau est mis à jour.
    """

    level_str = (niveau or parametres_application.niveau_log).upper().strip()
    level = getattr(logging, level_str, logging.INFO)

    for nom in _LOGGERS_BAVARDS:
        logging.getLogger(nom).setLevel(max(level, logging.WARNING))

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s level=%(levelname)s app=pizzeria logger=%(name)s msg=%(message)s",
    )
