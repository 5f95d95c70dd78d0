"""로깅 설정: 파일별 파싱 오류 등 진단 메시지는 RichHandler로 stderr 출력."""
from __future__ import annotations
import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "api_list_agent"


def configure_logging(verbose: bool = False) -> logging.Logger:
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # CLI를 여러 번 호출해도 핸들러가 중복되지 않도록
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
