"""Tests for Freemind XML import."""

from map_source.domain.services.freemind_import import freemind_to_document

NESTED = """<?xml version="1.0" encoding="UTF-8"?>
<map version="0.9.0">
  <node ID="root" TEXT="Root" FOLDED="true">
    <node TEXT="Right one"/>
    <node TEXT="Left" POSITION="left" BACKGROUND_COLOR="#ff0000">
      <node TEXT="Grandchild"/>
    </node>
    <node TEXT="Right two" POSITION="right"/>
  </node>
</map>
"""


def test_single_node_becomes_root_idea():
    doc = freemind_to_document('<map version="0.7.1"><node ID="1" TEXT="X"></node></map>')
    assert doc == {"id": 1, "title": "X"}


def test_children_keyed_by_rank_and_side():
    doc = freemind_to_document(NESTED)

    assert doc["title"] == "Root"
    assert set(doc["ideas"]) == {"1", "-2", "3"}
    assert doc["ideas"]["1"]["title"] == "Right one"
    assert doc["ideas"]["-2"]["title"] == "Left"
    assert doc["ideas"]["3"]["title"] == "Right two"


def test_ids_are_assigned_depth_first():
    doc = freemind_to_document(NESTED)

    assert doc["id"] == 1
    assert doc["ideas"]["1"]["id"] == 2
    assert doc["ideas"]["-2"]["id"] == 3
    assert doc["ideas"]["-2"]["ideas"]["1"]["id"] == 4
    assert doc["ideas"]["3"]["id"] == 5


def test_folded_and_background_become_attributes():
    doc = freemind_to_document(NESTED)

    assert doc["attr"] == {"collapsed": True}
    assert doc["ideas"]["-2"]["attr"] == {"style": {"background": "#ff0000"}}
    assert "attr" not in doc["ideas"]["1"]


def test_rich_content_title():
    xml = (
        "<map><node><richcontent TYPE=\"NODE\"><html><body>"
        "<p>Rich\n   title</p></body></html></richcontent></node></map>"
    )
    assert freemind_to_document(xml)["title"] == "Rich title"


def test_malformed_xml_degrades_to_empty_idea(caplog):
    doc = freemind_to_document("<map><node TEXT=")

    assert doc == {"id": 1, "title": ""}
    assert "could not be parsed" in caplog.text


def test_map_without_nodes_degrades_to_empty_idea():
    assert freemind_to_document("<map version='1.0'/>") == {"id": 1, "title": ""}


def test_deep_nesting_is_walked_without_recursion_limit():
    depth = 1200
    xml = "<map>" + "".join(f'<node TEXT="level {n}">' for n in range(depth)) + "</node>" * depth
    doc = freemind_to_document(xml + "</map>")

    ids = []
    while True:
        ids.append(doc["id"])
        if "ideas" not in doc:
            break
        assert list(doc["ideas"]) == ["1"]
        doc = doc["ideas"]["1"]
    assert ids == list(range(1, depth + 1))
    assert doc["title"] == f"level {depth - 1}"


def test_utf8_bytes_are_parsed():
    doc = freemind_to_document('<map><node TEXT="Größe"/></map>'.encode("utf-8"))

    assert doc == {"id": 1, "title": "Größe"}
