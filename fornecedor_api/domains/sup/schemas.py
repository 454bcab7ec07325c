# fornecedor_api/domains/sup/schemas.py

"""
'sup' 도메인 (공급업체 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
필드 단위 유효성 검사(필수 여부, 공백 금지, 최대 길이)는 이 스키마에서 수행되며,
검사를 통과하지 못한 요청은 저장소에 도달하지 않습니다.
"""

import uuid
from pydantic import field_validator
from sqlmodel import SQLModel, Field

from .models import NAME_MAX_LENGTH, DOCUMENT_MAX_LENGTH


class SupplierBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    document: str = Field(..., min_length=1, max_length=DOCUMENT_MAX_LENGTH)
    active: bool = True

    @field_validator("name", "document")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        # 공백만으로 이루어진 값은 입력되지 않은 것으로 봅니다. 값 자체는 변경하지 않습니다.
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class SupplierCreate(SupplierBase):
    pass


# PUT은 전체 교체(full replace)이므로 생성 스키마와 같은 필드를 모두 요구합니다.
class SupplierReplace(SupplierBase):
    pass


class SupplierRead(SupplierBase):
    id: uuid.UUID
