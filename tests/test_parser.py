import pytest

from api_list_agent.errors import SourceParseError
from api_list_agent.model import Marker, NamedValues, SingleValue
from api_list_agent.parser import parse_source

SRC = '''
package com.example.member;

import org.springframework.web.bind.annotation.*;

@RestController
@RequestMapping("/members")
public class MemberController {

    /**
     * Fetch member profile.
     */
    @GetMapping("/profile")
    public String profile() { return "ok"; }

    @RequestMapping(value = "/search", method = RequestMethod.POST)
    public String search() { return "ok"; }

    @Deprecated
    public void helper() {}

    static class Inner {
        public void innerMethod() {}
    }
}
'''


def test_classes_including_nested():
    classes = parse_source(SRC)
    assert [c.name for c in classes] == ["MemberController", "Inner"]


def test_class_annotations_and_payloads():
    ctrl = parse_source(SRC)[0]
    anns = {a.name: a.payload for a in ctrl.annotations}
    assert anns["RestController"] == Marker()
    assert anns["RequestMapping"] == SingleValue('"/members"')


def test_methods_are_direct_members_with_owner():
    ctrl, inner = parse_source(SRC)
    assert [m.name for m in ctrl.methods] == ["profile", "search", "helper"]
    assert all(m.enclosing_class() is ctrl for m in ctrl.methods)
    assert [m.name for m in inner.methods] == ["innerMethod"]


def test_named_pairs_render_raw_text():
    search = parse_source(SRC)[0].methods[1]
    [ann] = search.annotations
    assert ann.payload == NamedValues((("value", '"/search"'), ("method", "RequestMethod.POST")))


def test_javadoc_is_attached_to_method():
    profile = parse_source(SRC)[0].methods[0]
    assert profile.documentation is not None
    assert "Fetch member profile." in profile.documentation


def test_array_element_values():
    src = '''
    @RestController
    class A {
        @RequestMapping(value = "/x", method = {RequestMethod.GET, RequestMethod.POST})
        public void x() {}
    }
    '''
    [ann] = parse_source(src)[0].methods[0].annotations
    method_text = dict(ann.payload.pairs)["method"]
    assert "RequestMethod.GET" in method_text
    assert "RequestMethod.POST" in method_text


def test_interface_declarations_are_included():
    src = '''
    @RestController
    @RequestMapping("/api")
    interface MemberApi {
        @GetMapping("/ping")
        String ping();
    }
    '''
    [api] = parse_source(src)
    assert api.name == "MemberApi"
    assert [m.name for m in api.methods] == ["ping"]


def test_syntax_error_is_wrapped():
    with pytest.raises(SourceParseError) as excinfo:
        parse_source("public class {", path="Broken.java")
    assert excinfo.value.path == "Broken.java"


def test_truncated_source_is_wrapped():
    with pytest.raises(SourceParseError):
        parse_source("@", path="Truncated.java")


def test_deep_nesting_is_wrapped():
    src = "class Deep { int x = " + "(" * 3000 + "1" + ")" * 3000 + "; }"
    with pytest.raises(SourceParseError):
        parse_source(src)


def test_leading_bom_is_ignored():
    [ctrl, _] = parse_source("\ufeff" + SRC)
    assert ctrl.name == "MemberController"
