# fornecedor_api/core/crud_base.py

"""
계정 관련 테이블(usuarios, usuario_claims)이 공유하는 비동기 CRUD 기본 클래스입니다.
공급업체는 별도의 저장소 인터페이스(domains/sup/repository.py)를 사용합니다.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlmodel import SQLModel, select
from sqlmodel.sql.expression import SelectOfScalar
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model

    def _select_where(self, **filters: Any) -> SelectOfScalar[ModelType]:
        # 모델에 없는 필드명은 AttributeError를 발생시킵니다.
        statement = select(self.model)
        for field, value in filters.items():
            statement = statement.where(getattr(self.model, field) == value)
        return statement

    async def get_one_by(self, db: AsyncSession, **filters: Any) -> Optional[ModelType]:
        """
        조건을 모두 만족하는 레코드 하나를 반환합니다. 없으면 None.
        """
        result = await db.execute(self._select_where(**filters))
        return result.scalars().first()

    async def get_many_by(self, db: AsyncSession, **filters: Any) -> List[ModelType]:
        """
        조건을 모두 만족하는 레코드를 기본 키 순서로 반환합니다. (페이징 없음)
        """
        statement = self._select_where(**filters).order_by(*self.model.__table__.primary_key.columns)
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        스키마로부터 레코드를 만들어 즉시 커밋하고, DB 기본값이 반영된 객체를 반환합니다.
        """
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj
