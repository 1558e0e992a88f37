from bs4 import BeautifulSoup

from htmlobject.documents import (
    Fragment,
    cdata,
    fragment_to_markup,
    to_fragment,
    to_full_document,
    to_xml_document,
)
from htmlobject.markup import Element, EscapedText, HtmlList, RawHtml, VoidElement
from htmlobject.models import DocumentSettings


def _sample() -> Element:
    return Element(
        "p",
        [("class", "note")],
        HtmlList([EscapedText("1 < 2 & 'quoted'"), VoidElement("br"), RawHtml("<i>ok</i>")]),
    )


def test_fragment_is_bare_html_render():
    fragment = to_fragment(_sample())
    assert fragment == Fragment('<p class="note">1 &lt; 2 &amp; &#39;quoted&#39;<br><i>ok</i></p>')
    assert str(fragment) == fragment.text


def test_fragment_round_trip_does_not_reescape():
    fragment = to_fragment(_sample())
    markup = fragment_to_markup(fragment)
    assert markup == HtmlList([RawHtml(fragment.text)])
    assert to_fragment(markup) == fragment


def test_empty_fragment_becomes_empty_list():
    assert fragment_to_markup(Fragment("")) == HtmlList()
    assert to_fragment(HtmlList()).text == ""


def test_full_document_wraps_body():
    doc = to_full_document(EscapedText("a<b"))
    assert doc.text == (
        "<!DOCTYPE html>\n"
        "<html><head><title>HtmlDoc (autogenerated)</title></head><body>"
        "a&lt;b"
        "</body></html>"
    )


def test_full_document_title_from_settings_is_escaped():
    doc = to_full_document(HtmlList(), DocumentSettings(title="Q&A <draft>"))
    assert "<title>Q&amp;A &lt;draft&gt;</title>" in doc.text


def test_full_document_parses_as_html():
    doc = to_full_document(_sample())
    soup = BeautifulSoup(doc.text, "html.parser")
    assert soup.title.string == "HtmlDoc (autogenerated)"
    paragraph = soup.body.find("p")
    assert paragraph["class"] == ["note"]
    assert paragraph.find("i").string == "ok"


def test_xml_document_has_prolog_and_self_closing_void_tags():
    node = Element("feed", [("xmlns", "http://www.w3.org/2005/Atom")], VoidElement("link", [("href", "/a?b=1&c=2")]))
    doc = to_xml_document(node)
    assert doc.text == (
        "<?xml version='1.0' encoding='utf-8' ?>\n"
        '<feed xmlns="http://www.w3.org/2005/Atom"><link href="/a?b=1&amp;c=2"/></feed>'
    )


def test_xml_document_does_not_check_root():
    doc = to_xml_document(HtmlList([EscapedText("loose"), VoidElement("a"), VoidElement("b")]))
    assert doc.text.endswith("loose<a/><b/>")


def test_cdata_is_a_tree_transform():
    inner = RawHtml("<b>x</b>")
    wrapped = cdata(inner)
    assert wrapped == HtmlList([RawHtml("<![CDATA["), inner, RawHtml("]]>")])
    doc = to_xml_document(Element("script", [], wrapped))
    assert doc.text.endswith("<script><![CDATA[<b>x</b>]]></script>")
