"""소스 루트 아래 Java 파일 탐색."""
from __future__ import annotations
import os
from pathlib import Path
from typing import Iterator

from api_list_agent.errors import SourceRootError


def _raise(err: OSError) -> None:
    raise err


def iter_source_files(root: Path, ext: str = ".java") -> Iterator[Path]:
    """
    root 아래에서 ext로 끝나는 일반 파일을 지연 생성한다.
    root가 없거나 탐색 중 오류가 나면 예외를 그대로 올린다 (실행 중단).
    """
    root = Path(root)
    if not root.is_dir():
        raise SourceRootError(f"소스 루트가 없거나 디렉터리가 아닙니다: {root}")

    for base, _, names in os.walk(root, onerror=_raise):
        for n in sorted(names):
            if not n.endswith(ext):
                continue
            p = Path(base) / n
            if p.is_file():
                yield p
