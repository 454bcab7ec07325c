# fornecedor_api/domains/__init__.py

"""
비즈니스 도메인 패키지 모음입니다.

- `usr`: 사용자 계정, 클레임, 인증(등록/로그인) 도메인.
- `sup`: 공급업체(fornecedor) 도메인.
"""
