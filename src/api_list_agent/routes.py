"""컨트롤러 메소드 → RouteRecord 추출."""
from __future__ import annotations
from typing import Optional

from api_list_agent.annotations import extract_value, raw_value
from api_list_agent.description import describe
from api_list_agent.model import Annotation, HttpVerb, MethodDecl, RouteRecord

VERB_ANNOTATIONS: dict[str, HttpVerb] = {
    "GetMapping": "GET",
    "PostMapping": "POST",
    "PutMapping": "PUT",
    "DeleteMapping": "DELETE",
}
GENERIC_MAPPING = "RequestMapping"
ROUTE_ANNOTATIONS = frozenset(VERB_ANNOTATIONS) | {GENERIC_MAPPING}

# 검사 순서가 곧 우선순위 (첫 매칭 승리)
_VERB_TOKENS: tuple[HttpVerb, ...] = ("GET", "POST", "PUT", "DELETE")


def is_route_annotation(name: str) -> bool:
    return name in ROUTE_ANNOTATIONS


def infer_verb(method_text: Optional[str]) -> HttpVerb:
    """
    @RequestMapping(method = ...) 원문에서 HTTP 메소드 추론.
    대소문자 구분 부분 문자열 검사, GET → POST → PUT → DELETE 순으로 첫 매칭 반환.
    method 인자가 없거나 매칭이 없으면 "ALL".
    """
    if method_text is None:
        return "ALL"
    for verb in _VERB_TOKENS:
        if verb in method_text:
            return verb
    return "ALL"


def resolve_verb(annotation: Annotation) -> HttpVerb:
    if annotation.name == GENERIC_MAPPING:
        return infer_verb(raw_value(annotation, "method"))
    return VERB_ANNOTATIONS.get(annotation.name, "")


def normalize_path(base: str, raw_path: str) -> str:
    path = base + raw_path
    # 앞의 "/" 하나만 제거 후 다시 붙임 ("/api/" + "/users" → "/api//users" 유지)
    if path.startswith("/"):
        path = path[1:]
    return "/" + path


def extract_routes(method: MethodDecl, base_url: str) -> list[RouteRecord]:
    """메소드의 라우트 어노테이션마다 RouteRecord 하나씩 (없으면 빈 리스트)."""
    owner = method.enclosing_class()
    class_name = owner.name if owner is not None else ""

    records: list[RouteRecord] = []
    for ann in method.annotations:
        if not is_route_annotation(ann.name):
            continue
        records.append(RouteRecord(
            class_name=class_name,
            method_name=method.name,
            http_method=resolve_verb(ann),
            path=normalize_path(base_url, extract_value(ann, "value")),
            description=describe(method),
        ))
    return records
