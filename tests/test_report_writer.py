from pathlib import Path

import pytest

from api_list_agent.model import HEADER, RouteRecord
from api_list_agent.report import Report
from api_list_agent.writer import to_text, write_report


def _rec(path="/x", description=""):
    return RouteRecord(class_name="A", method_name="m", http_method="GET", path=path, description=description)


def test_header_is_always_first():
    report = Report()
    assert list(report.rows()) == [HEADER]
    report.extend([_rec("/a"), _rec("/b")])
    rows = list(report.rows())
    assert rows[0] == HEADER
    assert len(rows) == 3
    assert len(report) == 2


def test_to_text_comma_joined_lines():
    report = Report()
    report.extend([_rec("/a", "desc")])
    assert to_text(report) == (
        "Class Name,Method Name,HTTP Method,Path,Description\n"
        "A,m,GET,/a,desc\n"
    )


def test_commas_in_fields_are_not_escaped():
    report = Report()
    report.extend([_rec("/a", "one, two")])
    last = to_text(report).splitlines()[-1]
    assert last == "A,m,GET,/a,one, two"
    assert len(last.split(",")) == 6


def test_write_report_overwrites(tmp_path: Path):
    out = tmp_path / "out" / "api-list.txt"
    out.parent.mkdir()
    out.write_text("stale\nstale\nstale\n", encoding="utf-8")

    report = Report()
    report.extend([_rec()])
    assert write_report(report, out) == out
    assert out.read_text(encoding="utf-8").splitlines() == [
        "Class Name,Method Name,HTTP Method,Path,Description",
        "A,m,GET,/x,",
    ]


def test_records_are_hashable_values():
    assert {_rec(), _rec()} == {_rec()}


def test_write_report_to_directory_raises(tmp_path: Path):
    report = Report()
    report.extend([_rec()])
    with pytest.raises(OSError):
        write_report(report, tmp_path)
