# fornecedor_api/core/errors.py

"""
요청 유효성 검사 실패를 'validation problem' 응답으로 변환하는 예외 처리기를 정의합니다.

응답 본문 예시:
    {
        "type": "https://tools.ietf.org/html/rfc9110#section-15.5.21",
        "title": "One or more validation errors occurred.",
        "status": 422,
        "errors": {"name": ["String should have at most 200 characters"]}
    }
"""

import logging
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

VALIDATION_PROBLEM_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.21"
VALIDATION_PROBLEM_TITLE = "One or more validation errors occurred."
MALFORMED_BODY = "Corpo da requisição inválido"

# 요청 위치를 나타내는 loc 첫 요소는 필드명에서 제외합니다.
_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in _LOCATIONS:
        parts = parts[1:]
    return ".".join(parts)


def build_validation_problem(errors: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """
    pydantic 오류 목록을 필드별 메시지 목록으로 묶은 응답 본문을 만듭니다.
    """
    by_field: Dict[str, List[str]] = {}
    for error in errors:
        by_field.setdefault(_field_name(error.get("loc", ())), []).append(error.get("msg", "Invalid value"))
    return {
        "type": VALIDATION_PROBLEM_TYPE,
        "title": VALIDATION_PROBLEM_TITLE,
        "status": 422,
        "errors": by_field,
    }


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # JSON 자체를 해석할 수 없는 요청은 필드 오류가 아닌 잘못된 입력(400)으로 처리합니다.
    if any(error.get("type") == "json_invalid" for error in errors):
        logger.debug("Malformed JSON body on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": MALFORMED_BODY})

    logger.debug("Validation failed on %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=422,
        content=build_validation_problem(errors),
        media_type="application/problem+json",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
