# tests/domains/test_repository.py

"""
공급업체 저장소 구현(SQL, 메모리)을 라우터 없이 직접 검증하는 테스트 모듈입니다.
두 구현이 같은 계약을 따르는지 동일한 시나리오로 확인합니다.
"""

import uuid

import pytest
import pytest_asyncio
from sqlmodel.ext.asyncio.session import AsyncSession

from fornecedor_api.domains.sup import models as sup_models
from fornecedor_api.domains.sup import schemas as sup_schemas
from fornecedor_api.domains.sup.repository import (
    InMemorySupplierRepository,
    SqlSupplierRepository,
    SupplierNotFound,
    SupplierRepository,
    SupplierStorageError,
)


@pytest_asyncio.fixture(params=["sql", "memory"])
async def repo(request, db_session: AsyncSession) -> SupplierRepository:
    if request.param == "sql":
        return SqlSupplierRepository(db_session)
    return InMemorySupplierRepository()


@pytest.mark.asyncio
async def test_create_then_get(repo: SupplierRepository):
    supplier = sup_models.Supplier(name="Acme", document="12345678901234")

    assert await repo.create(supplier) == 1

    found = await repo.get_by_id(supplier.id)
    assert found is not None
    assert (found.name, found.document, found.active) == ("Acme", "12345678901234", True)
    assert await repo.exists(supplier.id)


@pytest.mark.asyncio
async def test_get_missing_returns_none(repo: SupplierRepository):
    assert await repo.get_by_id(uuid.uuid4()) is None
    assert not await repo.exists(uuid.uuid4())


@pytest.mark.asyncio
async def test_list_returns_all_rows(repo: SupplierRepository):
    await repo.create(sup_models.Supplier(name="Alfa", document="1"))
    await repo.create(sup_models.Supplier(name="Beta", document="2"))

    assert sorted(s.name for s in await repo.list()) == ["Alfa", "Beta"]


@pytest.mark.asyncio
async def test_replace_overwrites_every_field(repo: SupplierRepository):
    supplier = sup_models.Supplier(name="Acme", document="123", active=True)
    await repo.create(supplier)

    affected = await repo.replace(
        supplier.id, sup_schemas.SupplierReplace(name="Acme Corp", document="456", active=False)
    )

    assert affected == 1
    found = await repo.get_by_id(supplier.id)
    assert (found.name, found.document, found.active) == ("Acme Corp", "456", False)


@pytest.mark.asyncio
async def test_replace_missing_raises_not_found(repo: SupplierRepository):
    missing_id = uuid.uuid4()
    with pytest.raises(SupplierNotFound):
        await repo.replace(missing_id, sup_schemas.SupplierReplace(name="X", document="1"))
    assert not await repo.exists(missing_id)


@pytest.mark.asyncio
async def test_delete_removes_row(repo: SupplierRepository):
    supplier = sup_models.Supplier(name="Acme", document="123")
    await repo.create(supplier)

    assert await repo.delete(supplier.id) == 1
    assert await repo.get_by_id(supplier.id) is None

    with pytest.raises(SupplierNotFound):
        await repo.delete(supplier.id)


@pytest.mark.asyncio
async def test_create_duplicate_id_raises_storage_error(repo: SupplierRepository):
    supplier_id = uuid.uuid4()
    await repo.create(sup_models.Supplier(id=supplier_id, name="Acme", document="123"))

    with pytest.raises(SupplierStorageError):
        await repo.create(sup_models.Supplier(id=supplier_id, name="Outro", document="456"))


@pytest.mark.asyncio
async def test_in_memory_returns_copies():
    """
    메모리 저장소가 반환한 객체를 수정해도 저장된 값은 바뀌지 않는지 테스트합니다.
    """
    supplier = sup_models.Supplier(name="Acme", document="123")
    repo = InMemorySupplierRepository([supplier])

    found = await repo.get_by_id(supplier.id)
    found.name = "Alterado"

    assert (await repo.get_by_id(supplier.id)).name == "Acme"
