# fornecedor_api/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `log_config.py`: 표준 logging 모듈 초기화.
- `database.py`: 데이터베이스 연결, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `security.py`: 비밀번호 해싱, JWT 발급/검증, 클레임 기반 권한 부여.
- `errors.py`: 유효성 검사 실패 응답(validation problem) 변환.
- `dependencies.py`: FastAPI의 의존성 주입 시스템에서 사용될 공통 의존성 함수들.
"""

__title__ = "Fornecedor API Core"
__version__ = "0.1.0"
__all__ = []
