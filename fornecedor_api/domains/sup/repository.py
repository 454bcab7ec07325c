# fornecedor_api/domains/sup/repository.py

"""
공급업체(Supplier) 저장소(persistence gateway)를 정의하는 모듈입니다.

라우터는 `SupplierRepository` 인터페이스에만 의존하므로, 저장소 구현
(관계형 데이터베이스, 테스트용 메모리 저장소)을 라우터 수정 없이 교체할 수 있습니다.

모든 변경 작업은 즉시 커밋되며, 영향받은 행 수(0 또는 1)를 반환합니다.
- 행이 존재하지 않으면 `SupplierNotFound`를 발생시킵니다.
- 존재 확인 이후 쓰기 시점에 행이 사라지면(동시 수정) 0을 반환합니다.
- 저장소가 쓰기를 거부하면(무결성 오류 등) `SupplierStorageError`를 발생시킵니다.
"""

import abc
import logging
import uuid
from abc import ABC
from typing import Dict, List, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import DatabaseError
from sqlalchemy.orm.exc import FlushError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from .models import Supplier
from . import schemas as sup_schemas

logger = logging.getLogger(__name__)


class SupplierNotFound(Exception):
    def __init__(self, supplier_id: uuid.UUID):
        self.supplier_id = supplier_id
        super().__init__(f"Supplier {supplier_id} not found")


class SupplierStorageError(Exception):
    """저장소가 쓰기 작업을 거부했을 때 발생합니다."""


class SupplierRepository(ABC):
    """
    공급업체 저장소 인터페이스입니다.
    """

    @abc.abstractmethod
    async def list(self) -> List[Supplier]:
        """모든 공급업체를 반환합니다. (페이징, 필터링 없음)"""

    @abc.abstractmethod
    async def get_by_id(self, supplier_id: uuid.UUID) -> Optional[Supplier]:
        """ID로 공급업체를 조회합니다. 없으면 None."""

    @abc.abstractmethod
    async def exists(self, supplier_id: uuid.UUID) -> bool:
        """변경 추적(identity map)을 거치지 않고 행의 존재 여부만 확인합니다."""

    @abc.abstractmethod
    async def create(self, supplier: Supplier) -> int:
        """공급업체 한 건을 추가하고 커밋합니다."""

    @abc.abstractmethod
    async def replace(self, supplier_id: uuid.UUID, supplier_in: sup_schemas.SupplierReplace) -> int:
        """기존 행의 모든 필드를 교체합니다. (병합이 아닌 전체 교체, upsert 없음)"""

    @abc.abstractmethod
    async def delete(self, supplier_id: uuid.UUID) -> int:
        """기존 행을 삭제합니다."""


# =============================================================================
# 1. 관계형 데이터베이스 구현 (SQLModel AsyncSession)
# =============================================================================
class SqlSupplierRepository(SupplierRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self) -> List[Supplier]:
        result = await self.db.execute(select(Supplier))
        return list(result.scalars().all())

    async def get_by_id(self, supplier_id: uuid.UUID) -> Optional[Supplier]:
        return await self.db.get(Supplier, supplier_id)

    async def exists(self, supplier_id: uuid.UUID) -> bool:
        # 컬럼만 조회하므로 엔티티가 세션에 적재되지 않습니다.
        result = await self.db.execute(select(Supplier.id).where(Supplier.id == supplier_id))
        return result.first() is not None

    async def create(self, supplier: Supplier) -> int:
        try:
            self.db.add(supplier)
            await self.db.commit()
        except (DatabaseError, FlushError) as e:
            await self.db.rollback()
            logger.error("Failed to add Supplier: %s", e)
            raise SupplierStorageError(str(e)) from e
        await self.db.refresh(supplier)
        return 1

    async def replace(self, supplier_id: uuid.UUID, supplier_in: sup_schemas.SupplierReplace) -> int:
        if not await self.exists(supplier_id):
            raise SupplierNotFound(supplier_id)

        statement = (
            update(Supplier)
            .where(Supplier.id == supplier_id)
            .values(**supplier_in.model_dump(include={"name", "document", "active"}))
        )
        try:
            result = await self.db.execute(statement)
            await self.db.commit()
        except DatabaseError as e:
            await self.db.rollback()
            logger.error("Failed to update Supplier %s: %s", supplier_id, e)
            raise SupplierStorageError(str(e)) from e
        return result.rowcount

    async def delete(self, supplier_id: uuid.UUID) -> int:
        if not await self.exists(supplier_id):
            raise SupplierNotFound(supplier_id)

        statement = (
            delete(Supplier)
            .where(Supplier.id == supplier_id)
        )
        try:
            result = await self.db.execute(statement)
            await self.db.commit()
        except DatabaseError as e:
            await self.db.rollback()
            logger.error("Failed to delete Supplier %s: %s", supplier_id, e)
            raise SupplierStorageError(str(e)) from e
        return result.rowcount


# =============================================================================
# 2. 메모리 구현 (테스트 및 로컬 실행용)
# =============================================================================
def _clone(supplier: Supplier) -> Supplier:
    # 호출자가 반환값을 수정해도 저장된 행에 영향을 주지 않도록 새 인스턴스를 만듭니다.
    return Supplier(id=supplier.id, name=supplier.name, document=supplier.document, active=supplier.active)


class InMemorySupplierRepository(SupplierRepository):
    def __init__(self, suppliers: Optional[List[Supplier]] = None):
        self._rows: Dict[uuid.UUID, Supplier] = {}
        for supplier in suppliers or []:
            self._rows[supplier.id] = _clone(supplier)

    async def list(self) -> List[Supplier]:
        return [_clone(row) for row in self._rows.values()]

    async def get_by_id(self, supplier_id: uuid.UUID) -> Optional[Supplier]:
        row = self._rows.get(supplier_id)
        return _clone(row) if row is not None else None

    async def exists(self, supplier_id: uuid.UUID) -> bool:
        return supplier_id in self._rows

    async def create(self, supplier: Supplier) -> int:
        if supplier.id in self._rows:
            raise SupplierStorageError(f"Duplicate primary key {supplier.id}")
        self._rows[supplier.id] = _clone(supplier)
        return 1

    async def replace(self, supplier_id: uuid.UUID, supplier_in: sup_schemas.SupplierReplace) -> int:
        if not await self.exists(supplier_id):
            raise SupplierNotFound(supplier_id)
        self._rows[supplier_id] = Supplier(id=supplier_id, **supplier_in.model_dump(include={"name", "document", "active"}))
        return 1

    async def delete(self, supplier_id: uuid.UUID) -> int:
        if not await self.exists(supplier_id):
            raise SupplierNotFound(supplier_id)
        del self._rows[supplier_id]
        return 1
