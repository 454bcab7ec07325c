# tests/__init__.py

"""
Fornecedor API 테스트 스위트 패키지입니다.

- tests/test_main.py: 루트 및 헬스 체크 엔드포인트
- tests/core/: 보안 유틸리티, 예외 처리기, 설정
- tests/domains/: 'usr'(등록/로그인), 'sup'(공급업체) 도메인 및 저장소 구현
"""
