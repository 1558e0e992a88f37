from pathlib import Path

import pytest
from jinja2 import UndefinedError
from markupsafe import Markup

from htmlobject.documents import to_fragment
from htmlobject.markup import Element, EscapedText, RawHtml, VoidElement
from htmlobject.objects import Mapping, Scalar, Sequence
from htmlobject.template_bridge import (
    TemplateList,
    TemplateMap,
    render_template,
    template_environment,
    to_template_value,
)


def _content() -> Mapping:
    return Mapping(
        [
            ("foo", Sequence([Scalar(RawHtml("<br>")), Scalar(EscapedText("<hr>"))])),
            ("bar", Scalar(VoidElement("img", [("src", "file.jpg")]))),
        ]
    )


def test_attribute_lookup_prints_fragments():
    output = render_template("foo:{{ o.foo }},bar:{{ o.bar }}", o=_content())
    assert output == 'foo:<br>&lt;hr&gt;,bar:<img src="file.jpg">'


def test_template_value_shapes():
    value = to_template_value(_content())
    assert isinstance(value, TemplateMap)
    assert isinstance(value["foo"], TemplateList)
    assert value["foo"] == [Markup("<br>"), Markup("&lt;hr&gt;")]
    assert value["bar"] == Markup('<img src="file.jpg">')


def test_sequences_can_be_iterated():
    output = render_template(
        "{% for item in o.foo %}[{{ item }}]{% endfor %}", o=_content()
    )
    assert output == "[<br>][&lt;hr&gt;]"


def test_mappings_can_be_iterated_in_order():
    output = render_template(
        "{% for key in o %}{{ key }},{% endfor %}",
        o=_content(),
    )
    assert output == "foo,bar,"


def test_markup_binding_is_not_escaped_again():
    node = Element("b", [], EscapedText("x & y"))
    assert render_template("{{ n }}", n=node) == "<b>x &amp; y</b>"


def test_plain_strings_are_autoescaped():
    assert render_template("{{ s }}", s="<b>") == "&lt;b&gt;"


def test_missing_value_is_strict():
    with pytest.raises(UndefinedError):
        render_template("{{ missing_value }}")


def test_file_templates_use_loader(tmp_path: Path):
    (tmp_path / "page.html").write_text("<main>{{ o }}</main>", encoding="utf-8")
    env = template_environment([tmp_path])
    template = env.get_template("page.html")
    output = template.render(o=to_template_value(Sequence([Scalar(EscapedText("<x>"))])))
    assert output == "<main>&lt;x&gt;</main>"


def test_printing_without_autoescape_still_concatenates():
    value = to_template_value(Sequence([Scalar(RawHtml("<i>a</i>")), Scalar(EscapedText("b"))]))
    assert str(value) == "<i>a</i>b"


def test_fragment_binding_is_trusted():
    fragment = to_fragment(EscapedText("a<b"))
    assert render_template("{{ f }}", f=fragment) == "a&lt;b"
