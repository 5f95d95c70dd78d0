"""API 목록 생성: Java 파일 스캔 → 컨트롤러 분석(병렬) → 텍스트 리포트 출력."""
from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from rich.console import Console

from api_list_agent.classifier import base_url, is_controller
from api_list_agent.config import settings
from api_list_agent.errors import SourceParseError
from api_list_agent.model import RouteRecord
from api_list_agent.parser import parse_source
from api_list_agent.report import Report
from api_list_agent.routes import extract_routes
from api_list_agent.scanner import iter_source_files
from api_list_agent.writer import write_report

console = Console()
logger = logging.getLogger(__name__)


def extract_from_source(text: str, path: Path | str | None = None) -> list[RouteRecord]:
    records: list[RouteRecord] = []
    for class_decl in parse_source(text, path):
        if not is_controller(class_decl):
            continue
        url = base_url(class_decl)
        for method in class_decl.methods:
            records.extend(extract_routes(method, url))
    return records


def process_file(path: Path, encoding: str = "utf-8") -> list[RouteRecord]:
    """파일 하나 처리. 파싱/읽기 실패는 로그만 남기고 빈 결과."""
    try:
        text = path.read_text(encoding=encoding, errors="ignore")
        return extract_from_source(text, path)
    except (SourceParseError, OSError) as e:
        logger.warning("파일 처리 중 오류 발생: %s (%s)", path, e)
        return []


def build_report(
    source_root: Path,
    file_extension: str = ".java",
    max_workers: int | None = None,
    encoding: str = "utf-8",
) -> Report:
    report = Report()
    files = iter_source_files(source_root, file_extension)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(process_file, f, encoding): f for f in files}
        logger.debug("Submitted %d files", len(futures))
        # 완료 순서대로 합치므로 파일 간 순서는 보장되지 않음
        for future in as_completed(futures):
            report.extend(future.result())

    return report


def run_api_list(
    source_root: Path | None = None,
    out_file: Path | None = None,
    max_workers: int | None = None,
) -> Path:
    root = Path(source_root or settings.source_root).expanduser()
    out_path = Path(out_file or settings.output_file)

    console.print(f"[bold]Source root:[/bold] {root}")
    report = build_report(
        root,
        file_extension=settings.file_extension,
        max_workers=max_workers or settings.max_workers,
        encoding=settings.encoding,
    )
    console.print(f"Found [green]{len(report)}[/green] API endpoints")

    write_report(report, out_path, encoding=settings.encoding)
    console.print(f"[bold green]API list:[/bold green] {out_path}")
    return out_path
