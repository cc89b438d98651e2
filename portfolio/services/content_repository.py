# portfolio/services/content_repository.py

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio.services.errors import (
    RecordNotFound,
    RepositoryFetchError,
    RepositoryMutationError,
)

logger = logging.getLogger(__name__)


class ContentRepository:
    """
    Read/write access to one table (blogs, projects or skills).

    Reads return whole collections; filtering beyond `published` happens in
    memory (see content_filters). Every mutation is a single commit and
    nothing is changed when it fails.
    """

    def __init__(self, db: Session, model, label: Optional[str] = None):
        self.db = db
        self.model = model
        self.label = label or model.__tablename__.rstrip("s")

    def _query(self, order_by=None):
        query = self.db.query(self.model)
        if order_by is None:
            order_by = (self.model.created_at.desc(), self.model.id.desc())
        return query.order_by(*order_by)

    def _integrity_message(self, e: IntegrityError, action: str) -> str:
        detail = str(e.orig).lower()
        if hasattr(self.model, "slug") and "slug" in detail and ("unique" in detail or "duplicate" in detail):
            return f"A {self.label} with this slug already exists"
        return f"Failed to {action} {self.label}"

    def list_all(self, order_by=None) -> List[Any]:
        try:
            return self._query(order_by).all()
        except SQLAlchemyError as e:
            logger.exception("Error listing %s rows", self.label)
            raise RepositoryFetchError(f"Failed to load {self.label}s") from e

    def list_published(self, order_by=None) -> List[Any]:
        try:
            return self._query(order_by).filter(self.model.published == True).all()  # noqa: E712
        except SQLAlchemyError as e:
            logger.exception("Error listing published %s rows", self.label)
            raise RepositoryFetchError(f"Failed to load {self.label}s") from e

    def get_by_id(self, record_id: int) -> Optional[Any]:
        try:
            return self.db.query(self.model).filter(self.model.id == record_id).one_or_none()
        except SQLAlchemyError as e:
            logger.exception("Error loading %s %s", self.label, record_id)
            raise RepositoryFetchError(f"Failed to load {self.label}") from e

    def get_by_slug(self, slug: str, published_only: bool = True) -> Optional[Any]:
        try:
            query = self.db.query(self.model).filter(self.model.slug == slug)
            if published_only:
                query = query.filter(self.model.published == True)  # noqa: E712
            return query.one_or_none()
        except SQLAlchemyError as e:
            logger.exception("Error loading %s by slug %r", self.label, slug)
            raise RepositoryFetchError(f"Failed to load {self.label}") from e

    def insert(self, fields: Dict[str, Any]) -> int:
        row = self.model(**fields)
        try:
            self.db.add(row)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Rejected %s insert: %s", self.label, e.orig)
            raise RepositoryMutationError(self._integrity_message(e, "create")) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error creating %s", self.label)
            raise RepositoryMutationError(f"Failed to create {self.label}") from e
        self.db.refresh(row)
        logger.info("Created %s %s", self.label, row.id)
        return row.id

    def update(self, record_id: int, fields: Dict[str, Any]) -> None:
        row = self.get_by_id(record_id)
        if row is None:
            raise RecordNotFound(f"{self.label.capitalize()} not found")
        try:
            for name, value in fields.items():
                setattr(row, name, value)
            row.updated_at = datetime.utcnow()
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Rejected %s %s update: %s", self.label, record_id, e.orig)
            raise RepositoryMutationError(self._integrity_message(e, "update")) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error updating %s %s", self.label, record_id)
            raise RepositoryMutationError(f"Failed to update {self.label}") from e
        logger.info("Updated %s %s (%s)", self.label, record_id, ", ".join(sorted(fields)))

    def delete(self, record_id: int) -> None:
        row = self.get_by_id(record_id)
        if row is None:
            raise RecordNotFound(f"{self.label.capitalize()} not found")
        try:
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error deleting %s %s", self.label, record_id)
            raise RepositoryMutationError(f"Failed to delete {self.label}") from e
        logger.info("Deleted %s %s", self.label, record_id)
