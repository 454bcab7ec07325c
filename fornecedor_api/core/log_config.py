# fornecedor_api/core/log_config.py

"""
표준 logging 모듈을 애플리케이션 설정(LOG_LEVEL)에 맞게 초기화합니다.
각 모듈은 `logging.getLogger(__name__)`으로 자신의 로거를 가져와 사용합니다.
"""

import logging

from fornecedor_api.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging() -> None:
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    # 알 수 없는 레벨명은 "Level X" 문자열로 돌아옵니다.
    if isinstance(level, str):
        raise ValueError(f"Invalid log level {settings.LOG_LEVEL}")

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG_MODE else level,
        format=LOG_FORMAT,
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )
