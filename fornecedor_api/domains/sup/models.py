# fornecedor_api/domains/sup/models.py

"""
'sup' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

fornecedores 테이블은 다른 테이블과 외래 키 관계가 없으며,
생성 시 발급되는 UUID 기본 키만 가집니다.
"""

import uuid
from sqlmodel import Field, SQLModel


NAME_MAX_LENGTH = 200
DOCUMENT_MAX_LENGTH = 14


# =============================================================================
# 1. fornecedores 테이블 모델
# =============================================================================
class SupplierBase(SQLModel):
    """
    fornecedores 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    name: str = Field(max_length=NAME_MAX_LENGTH, nullable=False, description="공급업체명")
    document: str = Field(max_length=DOCUMENT_MAX_LENGTH, nullable=False, description="사업자 문서 번호 (CNPJ/CPF)")
    active: bool = Field(default=True, description="활성 여부")


class Supplier(SupplierBase, table=True):
    """
    fornecedores 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "fornecedores"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, description="공급업체 고유 ID")
