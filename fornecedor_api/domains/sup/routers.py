# fornecedor_api/domains/sup/routers.py

"""
'sup' 도메인 (공급업체 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- 조회(GET)는 인증 없이 허용됩니다.
- 생성/수정(POST/PUT)은 Bearer 토큰이 필요합니다.
- 삭제(DELETE)는 Bearer 토큰과 'ExcluirFornecedor' 클레임이 모두 필요합니다.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from fornecedor_api.core import dependencies as deps
from fornecedor_api.domains.usr.models import User

from . import models as sup_models
from . import schemas as sup_schemas
from .repository import SupplierNotFound, SupplierRepository, SupplierStorageError

logger = logging.getLogger(__name__)

SUPPLIER_NOT_INFORMED = "Fornecedor não informado"
SUPPLIER_NOT_FOUND = "Fornecedor não encontrado"
SAVE_FAILED = "Houve um problema ao salvar o registro"
DELETE_FAILED = "Houve um problema ao deletar o registro"
CONCURRENT_MODIFICATION = "O registro foi alterado ou removido por outra requisição"

router = APIRouter(
    tags=["Fornecedor"],  # Swagger UI에 표시될 태그
    responses={404: {"description": "Not found"}},
)


@router.get(
    "/fornecedor",
    response_model=List[sup_schemas.SupplierRead],
    summary="모든 공급업체 조회",
    name="GetFornecedor",
)
async def read_suppliers(
    repo: SupplierRepository = Depends(deps.get_supplier_repository),
):
    """
    모든 공급업체 목록을 조회합니다. (페이징, 필터링 없음)
    """
    return await repo.list()


@router.get(
    "/fornecedor/{supplier_id}",
    response_model=sup_schemas.SupplierRead,
    summary="특정 공급업체 정보 조회",
    name="GetFornecedorPorId",
)
async def read_supplier(
    supplier_id: uuid.UUID,
    repo: SupplierRepository = Depends(deps.get_supplier_repository),
):
    db_supplier = await repo.get_by_id(supplier_id)
    if db_supplier is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SUPPLIER_NOT_FOUND)
    return db_supplier


@router.post(
    "/fornecedor",
    response_model=sup_schemas.SupplierRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 공급업체 생성",
    name="PostFornecedor",
    responses={400: {"description": "Bad Request"}},
)
async def create_supplier(
    request: Request,
    response: Response,
    supplier_in: Optional[sup_schemas.SupplierCreate] = Body(None),
    repo: SupplierRepository = Depends(deps.get_supplier_repository),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    새로운 공급업체를 생성합니다.
    - **name**: 공급업체명 (필수, 최대 200자)
    - **document**: 문서 번호 (필수, 최대 14자)
    - **active**: 활성 여부 (선택, 기본값 true)

    성공 시 Location 헤더에 생성된 리소스의 주소를 담아 반환합니다.
    """
    if supplier_in is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=SUPPLIER_NOT_INFORMED)

    supplier = sup_models.Supplier.model_validate(supplier_in)
    try:
        affected = await repo.create(supplier)
    except SupplierStorageError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=SAVE_FAILED)
    if affected == 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=SAVE_FAILED)

    logger.info("Supplier %s created by user %s", supplier.id, current_user.id)
    response.headers["Location"] = str(request.url_for("GetFornecedorPorId", supplier_id=str(supplier.id)))
    return supplier


@router.put(
    "/fornecedor/{supplier_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="공급업체 정보 전체 교체",
    name="PutFornecedor",
    responses={400: {"description": "Bad Request"}, 409: {"description": "Conflict"}},
)
async def replace_supplier(
    supplier_id: uuid.UUID,
    payload: Optional[Dict[str, Any]] = Body(None),
    repo: SupplierRepository = Depends(deps.get_supplier_repository),
    current_user: User = Depends(deps.get_current_active_user),
):
    """
    ID로 특정 공급업체의 모든 필드를 교체합니다.
    - **name**, **document**, **active**: 생성 요청과 같은 규칙 (SupplierReplace)

    존재하지 않는 ID는 본문 유효성 검사보다 먼저 확인하여 404를 반환하며, 새로 생성하지 않습니다.
    """
    if payload is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=SUPPLIER_NOT_INFORMED)
    if not await repo.exists(supplier_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SUPPLIER_NOT_FOUND)

    try:
        supplier_in = sup_schemas.SupplierReplace.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in e.errors(include_url=False)]
        )

    try:
        affected = await repo.replace(supplier_id, supplier_in)
    except SupplierNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SUPPLIER_NOT_FOUND)
    except SupplierStorageError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=SAVE_FAILED)
    if affected == 0:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=CONCURRENT_MODIFICATION)

    logger.info("Supplier %s replaced by user %s", supplier_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/fornecedor/{supplier_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="공급업체 삭제",
    name="DeleteFornecedor",
    responses={400: {"description": "Bad Request"}, 403: {"description": "Forbidden"}, 409: {"description": "Conflict"}},
)
async def delete_supplier(
    supplier_id: uuid.UUID,
    repo: SupplierRepository = Depends(deps.get_supplier_repository),
    current_user: User = Depends(deps.require_delete_supplier_claim),
):
    """
    ID로 특정 공급업체를 삭제합니다. 'ExcluirFornecedor' 클레임이 필요합니다.
    """
    try:
        affected = await repo.delete(supplier_id)
    except SupplierNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=SUPPLIER_NOT_FOUND)
    except SupplierStorageError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=DELETE_FAILED)
    if affected == 0:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=CONCURRENT_MODIFICATION)

    logger.info("Supplier %s deleted by user %s", supplier_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
