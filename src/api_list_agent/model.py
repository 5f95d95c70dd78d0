"""Java 선언 트리 뷰 모델 + API 목록 레코드."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict


# ----- 어노테이션 값 형태 (태그드 variant) -----

@dataclass(frozen=True)
class SingleValue:
    """@GetMapping("/x") 처럼 이름 없는 값 하나."""
    text: str


@dataclass(frozen=True)
class NamedValues:
    """@RequestMapping(value = "/x", method = RequestMethod.GET) 형태."""
    pairs: Tuple[Tuple[str, str], ...] = ()


@dataclass(frozen=True)
class Marker:
    """@RestController 처럼 값이 없는 마커."""


AnnotationPayload = Union[SingleValue, NamedValues, Marker]


@dataclass(frozen=True)
class Annotation:
    name: str
    payload: AnnotationPayload = Marker()


# ----- 선언 노드 -----

@dataclass
class MethodDecl:
    name: str
    annotations: list[Annotation] = field(default_factory=list)
    documentation: Optional[str] = None   # /** ... */ 원문
    owner: Optional["ClassDecl"] = field(default=None, repr=False, compare=False)

    def enclosing_class(self) -> Optional["ClassDecl"]:
        return self.owner


@dataclass
class ClassDecl:
    name: str
    annotations: list[Annotation] = field(default_factory=list)
    methods: list[MethodDecl] = field(default_factory=list)

    def add_method(self, method: MethodDecl) -> MethodDecl:
        method.owner = self
        self.methods.append(method)
        return method


# ----- 출력 레코드 -----

HttpVerb = Literal["GET", "POST", "PUT", "DELETE", "ALL", ""]

HEADER: Tuple[str, str, str, str, str] = (
    "Class Name",
    "Method Name",
    "HTTP Method",
    "Path",
    "Description",
)


class RouteRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    class_name: str
    method_name: str
    http_method: HttpVerb
    path: str                 # /members/profile
    description: str = ""

    def as_row(self) -> Tuple[str, str, str, str, str]:
        return (self.class_name, self.method_name, self.http_method, self.path, self.description)
