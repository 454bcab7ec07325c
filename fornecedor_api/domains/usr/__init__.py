# fornecedor_api/domains/usr/__init__.py

"""
FastAPI 애플리케이션의 'usr' 도메인 패키지입니다.

'usr' 도메인은 사용자 계정, 사용자 클레임, 그리고 인증(등록/로그인)과 관련된
핵심 데이터를 관리하는 역할을 합니다.

주요 서브모듈:
- `models.py`: usuarios, usuario_claims 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 등록/로그인 요청 및 토큰 응답 스키마.
- `crud.py`: 비밀번호 정책, 사용자 등록, 로그인(계정 잠금 포함), 클레임 관리 로직.
- `routers.py`: /registro, /login 엔드포인트 정의.
"""

__title__ = "Fornecedor API User Domain"
__description__ = "Manages user accounts and claims, and handles registration and login."
__version__ = "0.1.0"
__all__ = []
