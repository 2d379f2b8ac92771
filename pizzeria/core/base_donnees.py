from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine


def url_fichier_sqlite(nom_fichier: str) -> str:
    """URL SQLAlchemy (driver aiosqlite) d’un fichier de sauvegarde."""

    return f"sqlite+aiosqlite:///{nom_fichier}"


def creer_moteur_async(nom_fichier: str) -> AsyncEngine:
    return create_async_engine(url_fichier_sqlite(nom_fichier))


def creer_fabrique_session(moteur: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=moteur,
        class_=AsyncSession,
        expire_on_commit=False,
    )
