"""Request repository - Database operations shared by request entities"""

from typing import Optional

from sqlalchemy.orm import Session


class RequestRepository:
    """
    CRUD persistence for one request entity.
    Subclasses set ``model`` and optionally ``load_options`` for relationships
    that are joined whenever entities are fetched.
    """

    model = None
    load_options: tuple = ()

    @classmethod
    def _query(cls, db: Session, status: Optional[str] = None):
        query = db.query(cls.model)
        if status:
            query = query.filter(cls.model.status == status)
        return query

    @classmethod
    def count(cls, db: Session, status: Optional[str] = None) -> int:
        """Count entities, optionally only those with the given status"""
        return cls._query(db, status).count()

    @classmethod
    def find_page(cls, db: Session, status: Optional[str], offset: int, limit: int) -> list:
        """Newest first; id breaks ties so pages never overlap"""
        return (
            cls._query(db, status)
            .options(*cls.load_options)
            .order_by(cls.model.created_at.desc(), cls.model.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    @classmethod
    def find_by_id(cls, db: Session, request_id: int):
        return db.query(cls.model).options(*cls.load_options).filter(cls.model.id == request_id).first()

    @classmethod
    def create(cls, db: Session, **data):
        entity = cls.model(**data)
        db.add(entity)
        db.commit()
        db.refresh(entity)
        return entity

    @classmethod
    def update(cls, db: Session, entity, **updates):
        for key, value in updates.items():
            if hasattr(entity, key):
                setattr(entity, key, value)

        db.commit()
        db.refresh(entity)
        return entity

    @classmethod
    def delete(cls, db: Session, entity) -> None:
        db.delete(entity)
        db.commit()
