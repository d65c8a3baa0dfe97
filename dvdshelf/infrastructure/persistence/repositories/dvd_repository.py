"""
Implémentation SQLModel du repository DVD.

Implémente l'interface IDvdRepository pour la persistance des DVD
dans la base de données via SQLModel.

La restriction au propriétaire est appliquee par prédicat dans chaque
requête (owner_id == ...) : un DVD d'un autre utilisateur n'est jamais
retourne, modifie ni supprime.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger
from sqlalchemy import func, or_
from sqlmodel import Session, select

from dvdshelf.core.entities.dvd import Dvd, DvdPatch, DvdStatus
from dvdshelf.core.ports.repositories import IDvdRepository
from dvdshelf.core.value_objects.filters import DvdFilter
from dvdshelf.infrastructure.persistence.models import DvdModel


class SQLModelDvdRepository(IDvdRepository):
    """
    Repository SQLModel pour les DVD.

    Implémente IDvdRepository avec conversion bidirectionnelle
    entre l'entité Dvd (domaine) et DvdModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: DvdModel) -> Dvd:
        """Convertit un modèle DB en entité domaine."""
        return Dvd(
            id=model.id,
            owner_id=model.owner_id,
            title=model.title,
            year=model.year,
            genre=model.genre,
            director=model.director,
            status=DvdStatus(model.status),
            poster_url=model.poster_url,
            barcode=model.barcode,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Dvd, owner_id: str) -> DvdModel:
        """Convertit une entité domaine en modèle DB (sans ID ni date)."""
        return DvdModel(
            owner_id=owner_id,
            title=entity.title,
            year=entity.year,
            genre=entity.genre,
            director=entity.director,
            status=DvdStatus(entity.status).value,
            poster_url=entity.poster_url,
            barcode=entity.barcode,
        )

    def _owned(self, owner_id: str):
        return select(DvdModel).where(DvdModel.owner_id == owner_id)

    def _get_model(self, dvd_id: int, owner_id: str) -> Optional[DvdModel]:
        statement = self._owned(owner_id).where(DvdModel.id == dvd_id)
        return self._session.exec(statement).first()

    def get(self, dvd_id: int, owner_id: str) -> Optional[Dvd]:
        """Récupère un DVD par son ID pour le propriétaire."""
        model = self._get_model(dvd_id, owner_id)
        if model:
            return self._to_entity(model)
        return None

    def list(self, owner_id: str) -> list[Dvd]:
        """Liste les DVD du propriétaire."""
        statement = self._owned(owner_id).order_by(DvdModel.id)
        return [self._to_entity(m) for m in self._session.exec(statement).all()]

    def insert(self, dvd: Dvd, owner_id: str) -> Dvd:
        """Insere un DVD ; l'ID et created_at sont attribues par la base."""
        model = self._to_model(dvd, owner_id)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        logger.debug("DVD insere", dvd_id=model.id, owner_id=owner_id)
        return self._to_entity(model)

    def update(self, dvd_id: int, patch: DvdPatch, owner_id: str) -> Optional[Dvd]:
        """Fusionne le patch champ par champ dans le DVD existant."""
        model = self._get_model(dvd_id, owner_id)
        if model is None:
            return None

        for name, value in patch.changes().items():
            if name == "status" and value is not None:
                value = DvdStatus(value).value
            setattr(model, name, value)

        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)

    def delete(self, dvd_id: int, owner_id: str) -> bool:
        """Supprime un DVD du propriétaire."""
        model = self._get_model(dvd_id, owner_id)
        if model is None:
            return False
        self._session.delete(model)
        self._session.commit()
        return True

    def search(self, text: str, owner_id: str) -> list[Dvd]:
        """
        Recherche insensible à la casse dans titre, réalisateur et genre.

        Sous SQLite, lower() est la version Unicode enregistrée par
        create_db_engine ; les lettres accentuées sont donc repliées
        comme par str.lower.
        """
        needle = text.lower()
        statement = (
            self._owned(owner_id)
            .where(
                or_(
                    func.lower(DvdModel.title).contains(needle, autoescape=True),
                    func.lower(DvdModel.director).contains(needle, autoescape=True),
                    func.lower(DvdModel.genre).contains(needle, autoescape=True),
                )
            )
            .order_by(DvdModel.id)
        )
        return [self._to_entity(m) for m in self._session.exec(statement).all()]

    def filter(self, criteria: DvdFilter, owner_id: str) -> list[Dvd]:
        """Filtre par statut, genre et année (criteres combines en ET)."""
        statement = self._owned(owner_id)
        if criteria.status is not None:
            statement = statement.where(
                DvdModel.status == DvdStatus(criteria.status).value
            )
        if criteria.genre:
            statement = statement.where(
                func.lower(DvdModel.genre).contains(
                    criteria.genre.lower(), autoescape=True
                )
            )
        if criteria.year is not None:
            statement = statement.where(DvdModel.year == criteria.year)

        statement = statement.order_by(DvdModel.id)
        return [self._to_entity(m) for m in self._session.exec(statement).all()]
