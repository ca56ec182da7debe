import json

from wp_blocks.block_parser.core.block_node import SourceFormat
from wp_blocks.block_parser.parsing.format_dispatcher import FormatDispatcher


def test_empty_content() -> None:
    """Test empty and whitespace content yield no blocks"""
    assert FormatDispatcher().dispatch("") == []
    assert FormatDispatcher().dispatch("\n   \n") == []


def test_block_markup_wins(simple_content: str) -> None:
    """Test comment-delimited markup takes the block path"""
    blocks = FormatDispatcher().dispatch(simple_content)

    assert [b.source_format for b in blocks] == [SourceFormat.COMMENT_BLOCK, SourceFormat.COMMENT_BLOCK]


def test_flexible_layout_array() -> None:
    """Test each layout row becomes one block"""
    content = json.dumps([
        {"acf_fc_layout": "hero_block", "title": "Hero Title", "button_text": "Click Me"},
        {"acf_fc_layout": "text_block", "content": "This is text content"}
    ])
    blocks = FormatDispatcher().dispatch(content)

    assert [b.name for b in blocks] == ["acf/hero_block", "acf/text_block"]
    assert blocks[0].attributes == {"title": "Hero Title", "button_text": "Click Me"}
    assert blocks[1].attributes == {"content": "This is text content"}
    assert blocks[0].layout == "hero_block"
    assert blocks[0].raw_inner_content == ""


def test_flexible_layout_object() -> None:
    """Test a single layout object yields one block"""
    blocks = FormatDispatcher().dispatch('{"acf_fc_layout": "cta", "url": "/contact"}')

    assert len(blocks) == 1
    assert blocks[0].name == "acf/cta"
    assert blocks[0].source_format == SourceFormat.ACF_FLEXIBLE_LAYOUT
    assert blocks[0].attributes == {"url": "/contact"}


def test_flexible_layout_skips_rows() -> None:
    """Test rows without a layout are skipped with a warning"""
    dispatcher = FormatDispatcher()
    blocks = dispatcher.dispatch(json.dumps([{"acf_fc_layout": "hero"}, {"title": "orphan"}, "text"]))

    assert [b.name for b in blocks] == ["acf/hero"]
    assert len(dispatcher.warnings) == 2
    assert dispatcher.warnings[0].startswith("Skipped flexible content row 1")


def test_json_without_layout_is_html() -> None:
    """Test JSON that is not flexible content falls back to HTML"""
    for content in ('{"title": "x"}', '[1, 2, 3]', '"just a string"'):
        dispatcher = FormatDispatcher()
        blocks = dispatcher.dispatch(content)

        assert len(blocks) == 1
        assert blocks[0].name == "core/html"
        assert blocks[0].raw_inner_content == content
        assert dispatcher.warnings == []


def test_html_fallback_keeps_content_verbatim() -> None:
    """Test opaque HTML keeps the original string"""
    content = '\n<div class="custom-content">Custom HTML content</div>\n'
    blocks = FormatDispatcher().dispatch(content)

    assert len(blocks) == 1
    assert blocks[0].source_format == SourceFormat.OPAQUE_HTML
    assert blocks[0].attributes == {"content": content}
    assert blocks[0].raw_inner_content == content


def test_broken_markup_is_html() -> None:
    """Test markup with only broken markers is treated as HTML"""
    blocks = FormatDispatcher().dispatch('<!-- wp: --><img/>')

    assert len(blocks) == 1
    assert blocks[0].name == "core/html"


def test_unbalanced_payload_keeps_block() -> None:
    """Test a block with an unbalanced payload stays a block"""
    dispatcher = FormatDispatcher()
    blocks = dispatcher.dispatch('<!-- wp:image {"id":1 --><img/><!-- /wp:image -->')

    assert len(blocks) == 1
    assert blocks[0].name == "image"
    assert blocks[0].attributes == {}
    assert blocks[0].raw_inner_content == "<img/>"
    assert len(dispatcher.warnings) == 1


def test_deeply_nested_brackets_are_html() -> None:
    """Test bracket text too deep for the JSON decoder falls back to HTML"""
    content = "[" * 5000
    dispatcher = FormatDispatcher()
    blocks = dispatcher.dispatch(content)

    assert len(blocks) == 1
    assert blocks[0].source_format == SourceFormat.OPAQUE_HTML
    assert blocks[0].raw_inner_content == content


def test_flexible_layout_skips_empty_layouts() -> None:
    """Test rows with a null or empty layout are skipped like missing ones"""
    dispatcher = FormatDispatcher()
    content = json.dumps([
        {"acf_fc_layout": "hero"},
        {"acf_fc_layout": None},
        {"acf_fc_layout": ""}
    ])
    blocks = dispatcher.dispatch(content)

    assert [b.name for b in blocks] == ["acf/hero"]
    assert dispatcher.warnings == [
        "Skipped flexible content row 1 without acf_fc_layout",
        "Skipped flexible content row 2 without acf_fc_layout"
    ]


def test_single_object_with_empty_layout_is_html() -> None:
    """Test a layout object with an empty layout is not flexible content"""
    blocks = FormatDispatcher().dispatch('{"acf_fc_layout": ""}')

    assert blocks[0].name == "core/html"
