"""Generic CRUD operations shared by every entity gateway."""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from tidyhq.core.errors import ValidationFailed
from tidyhq.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: str) -> Optional[ModelType]:
        return db.get(self.model, id)

    def get_multi(self, db: Session) -> List[ModelType]:
        return db.query(self.model).order_by(self.model.created_at.desc()).all()

    def create(self, db: Session, *, obj_in: CreateSchemaType, commit: bool = True, **extra: Any) -> ModelType:
        data = obj_in.model_dump()
        data.update(extra)
        # An explicit None would suppress the column default on INSERT
        data = {k: v for k, v in data.items() if v is not None or not self._has_default(k)}
        obj = self.model(**self._prepare_create(data))
        db.add(obj)
        self._save(db, obj, commit)
        return obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: UpdateSchemaType | Dict[str, Any],
        commit: bool = True,
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = dict(obj_in)
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if value is None and not self._nullable(field):
                raise ValidationFailed.for_field(field, f"{field} cannot be null")
        for field, value in self._prepare_update(db_obj, update_data).items():
            setattr(db_obj, field, value)
        self._save(db, db_obj, commit)
        return db_obj

    def delete(self, db: Session, *, id: str) -> bool:
        obj = self.get(db, id)
        if obj is None:
            return False
        db.delete(obj)
        db.commit()
        return True

    def _has_default(self, attr: str) -> bool:
        prop = inspect(self.model).column_attrs.get(attr)
        return prop is not None and prop.columns[0].default is not None

    def _nullable(self, attr: str) -> bool:
        prop = inspect(self.model).column_attrs.get(attr)
        return prop is None or bool(prop.columns[0].nullable)

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    def _prepare_update(self, db_obj: ModelType, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    @staticmethod
    def _save(db: Session, obj: ModelType, commit: bool) -> None:
        if commit:
            db.commit()
            db.refresh(obj)
        else:
            db.flush()
