"""API 목록 추출 예외."""
from __future__ import annotations
from pathlib import Path


class ApiListError(Exception):
    pass


class SourceParseError(ApiListError):
    """파일 하나를 구문 트리로 만들지 못함 (해당 파일만 건너뜀)."""

    def __init__(self, path: Path | str | None, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class SourceRootError(ApiListError):
    """소스 루트가 없거나 디렉터리가 아님 (실행 전체 중단)."""
