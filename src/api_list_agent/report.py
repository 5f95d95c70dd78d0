"""API 목록 리포트 (헤더 행 + RouteRecord)."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from api_list_agent.model import HEADER, RouteRecord


@dataclass
class Report:
    records: List[RouteRecord] = field(default_factory=list)

    def extend(self, records: Iterable[RouteRecord]) -> None:
        # 워커가 돌려준 파일별 결과를 조정 스레드에서만 합친다
        self.records.extend(records)

    def rows(self) -> Iterator[Tuple[str, ...]]:
        yield HEADER
        for r in self.records:
            yield r.as_row()

    def __len__(self) -> int:
        return len(self.records)
