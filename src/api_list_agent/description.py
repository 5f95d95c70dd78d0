from __future__ import annotations

from javalang import javadoc

from api_list_agent.model import MethodDecl


def describe(method: MethodDecl) -> str:
    """Javadoc의 설명 부분(@param 등 블록 태그 이전)만 반환. 없으면 ""."""
    if not method.documentation:
        return ""
    try:
        return javadoc.parse(method.documentation).description
    except (ValueError, IndexError):
        # /** ... */ 형식이 아닌 주석
        return ""
