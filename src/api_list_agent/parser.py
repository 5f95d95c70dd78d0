"""javalang 구문 트리 → ClassDecl / MethodDecl / Annotation 뷰 변환."""
from __future__ import annotations
from pathlib import Path
from typing import Any

import javalang
from javalang import tree as jtree

from api_list_agent.errors import SourceParseError
from api_list_agent.model import (
    Annotation,
    AnnotationPayload,
    ClassDecl,
    Marker,
    MethodDecl,
    NamedValues,
    SingleValue,
)

_TYPE_DECLS = (jtree.ClassDeclaration, jtree.InterfaceDeclaration)


def parse_source(text: str, path: Path | str | None = None) -> list[ClassDecl]:
    """소스 텍스트를 파싱해 (중첩 포함) 모든 class/interface 선언을 반환한다."""
    # UTF-8 BOM은 javalang 토크나이저가 처리하지 못함
    if text.startswith("\ufeff"):
        text = text[1:]

    # javalang은 구문 오류 외에도 StopIteration(잘린 파일), RecursionError(깊은 중첩) 등을 던진다
    try:
        unit = javalang.parse.parse(text)
        return [_to_class(node) for _, node in unit if isinstance(node, _TYPE_DECLS)]
    except Exception as e:
        raise SourceParseError(path, str(e) or type(e).__name__) from e


def _to_class(node) -> ClassDecl:
    decl = ClassDecl(name=node.name, annotations=_to_annotations(node.annotations))
    # node.methods 는 직접 선언된 메소드만 (중첩 클래스 메소드 제외)
    for m in node.methods:
        decl.add_method(MethodDecl(
            name=m.name,
            annotations=_to_annotations(m.annotations),
            documentation=getattr(m, "documentation", None),
        ))
    return decl


def _to_annotations(anns) -> list[Annotation]:
    return [Annotation(name=a.name, payload=_to_payload(a.element)) for a in (anns or [])]


def _to_payload(element: Any) -> AnnotationPayload:
    if element is None:
        return Marker()
    if isinstance(element, list):
        return NamedValues(tuple((p.name, render_element(p.value)) for p in element))
    return SingleValue(render_element(element))


def render_element(node: Any) -> str:
    """어노테이션 값 노드를 소스와 비슷한 텍스트로 되돌린다 (따옴표 유지)."""
    if node is None:
        return ""
    if isinstance(node, jtree.Literal):
        return _prefixed(node, node.value)
    if isinstance(node, jtree.MemberReference):
        member = f"{node.qualifier}.{node.member}" if node.qualifier else node.member
        return _prefixed(node, member)
    if isinstance(node, jtree.ClassReference):
        return f"{getattr(node.type, 'name', '')}.class"
    if isinstance(node, jtree.ElementArrayValue):
        return "{" + ", ".join(render_element(v) for v in (node.values or [])) + "}"
    if isinstance(node, jtree.ArrayInitializer):
        return "{" + ", ".join(render_element(v) for v in (node.initializers or [])) + "}"
    if isinstance(node, jtree.BinaryOperation):
        return f"{render_element(node.operandl)} {node.operator} {render_element(node.operandr)}"
    if isinstance(node, jtree.Annotation):
        payload = _to_payload(node.element)
        if isinstance(payload, Marker):
            return f"@{node.name}"
        if isinstance(payload, SingleValue):
            return f"@{node.name}({payload.text})"
        return f"@{node.name}(" + ", ".join(f"{k} = {v}" for k, v in payload.pairs) + ")"
    return ""


def _prefixed(node, text: str) -> str:
    ops = "".join(getattr(node, "prefix_operators", None) or [])
    return f"{ops}{text}"
