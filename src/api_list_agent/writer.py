"""리포트 → 콤마 구분 텍스트 파일."""
from __future__ import annotations
from pathlib import Path

from api_list_agent.report import Report


def to_text(report: Report) -> str:
    # 필드 안의 콤마는 이스케이프하지 않음
    return "".join(",".join(row) + "\n" for row in report.rows())


def write_report(report: Report, out_path: Path, encoding: str = "utf-8") -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(to_text(report), encoding=encoding)
    return out_path
