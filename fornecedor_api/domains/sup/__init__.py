# fornecedor_api/domains/sup/__init__.py

"""
FastAPI 애플리케이션의 'sup' 도메인 패키지입니다.

'sup' 도메인은 공급업체(Supplier, fornecedor) 정보를 관리합니다.

주요 서브모듈:
- `models.py`: fornecedores 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 공급업체 요청/응답 스키마 (필드 유효성 검사).
- `repository.py`: 저장소 인터페이스와 SQL/메모리 구현.
- `routers.py`: /fornecedor 엔드포인트 정의.
"""

__title__ = "Fornecedor API Supplier Domain"
__description__ = "Manages supplier (fornecedor) records."
__version__ = "0.1.0"
__all__ = []
