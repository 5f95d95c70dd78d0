"""
API 목록 추출 CLI (api-list-agent).
소스 루트/출력 파일은 설정(.env, API_LIST_*)으로 지정한다.
"""
from __future__ import annotations

import typer
from rich.console import Console

from api_list_agent.logging_setup import configure_logging
from api_list_agent.run import run_api_list

console = Console()

app = typer.Typer(
    name="api-list-agent",
    add_completion=False,
    help="Spring 컨트롤러에서 API 목록(클래스, 메소드, HTTP 메소드, 경로, 설명)을 추출",
)


@app.callback(invoke_without_command=True)
def main():
    """설정된 소스 루트를 스캔해 API 목록 텍스트 파일을 생성."""
    configure_logging()
    try:
        out_path = run_api_list()
    except Exception:
        console.print_exception()
        raise typer.Exit(code=1)

    console.print(f"API 목록이 성공적으로 텍스트 파일로 저장되었습니다. ({out_path})")
