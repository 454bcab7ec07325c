# fornecedor_api/__init__.py

"""
Fornecedor API FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 공급업체(fornecedor) CRUD 엔드포인트와 사용자 등록/로그인(JWT 발급)을 제공합니다.
FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 보안 관련 유틸리티를 담는 core 서브패키지,
그리고 각 비즈니스 도메인(usr, sup)을 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Fornecedor API"
APP_VERSION = "0.1.0"

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Supplier (fornecedor) CRUD API with JWT based registration and login."
__license__ = "MIT"
__all__ = []
