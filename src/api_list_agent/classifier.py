"""컨트롤러 판별 + 클래스 레벨 base URL."""
from __future__ import annotations

from api_list_agent.annotations import extract_value
from api_list_agent.model import ClassDecl

CONTROLLER_ANNOTATIONS = frozenset({"RestController", "Controller"})
CLASS_MAPPING_ANNOTATION = "RequestMapping"


def is_controller(class_decl: ClassDecl) -> bool:
    return any(a.name in CONTROLLER_ANNOTATIONS for a in class_decl.annotations)


def base_url(class_decl: ClassDecl) -> str:
    # 첫 번째 @RequestMapping만 사용 (여러 개여도 병합하지 않음)
    for a in class_decl.annotations:
        if a.name == CLASS_MAPPING_ANNOTATION:
            return extract_value(a, "value")
    return ""
