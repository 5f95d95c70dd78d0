"""어노테이션 인자 값 읽기 (단일 값 / name=value 쌍 / 마커)."""
from __future__ import annotations
from typing import Optional

from api_list_agent.model import Annotation, Marker, NamedValues, SingleValue


def strip_quotes(text: str) -> str:
    return text.replace('"', "")


def raw_value(annotation: Annotation, argument_name: str) -> Optional[str]:
    """name=value 형태에서 argument_name 인자의 원문 텍스트. 없으면 None."""
    match annotation.payload:
        case NamedValues(pairs=pairs):
            for name, value in pairs:
                if name == argument_name:
                    return value
            return None
        case SingleValue() | Marker():
            return None


def extract_value(annotation: Annotation, argument_name: str) -> str:
    """
    인자 값을 따옴표 제거 후 반환한다. 지정되지 않았으면 "" (오류 아님).
    단일 값 형태는 argument_name과 무관하게 그 값을 path/value로 간주한다.
    """
    match annotation.payload:
        case SingleValue(text=text):
            return strip_quotes(text)
        case NamedValues():
            value = raw_value(annotation, argument_name)
            return strip_quotes(value) if value is not None else ""
        case Marker():
            return ""
