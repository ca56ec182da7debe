from wp_blocks.block_parser.core.block_node import BlockNode, SourceFormat


def test_defaults() -> None:
    """Test node defaults"""
    node = BlockNode(name="core/paragraph")

    assert node.attributes == {}
    assert node.children == []
    assert node.raw_inner_content == ""
    assert node.source_format == SourceFormat.COMMENT_BLOCK
    assert node.is_valid
    assert not node.has_children


def test_layout() -> None:
    """Test layout name is only set for flexible layouts"""
    assert BlockNode(name="acf/hero", source_format=SourceFormat.ACF_FLEXIBLE_LAYOUT).layout == "hero"
    assert BlockNode(name="acf/hero").layout is None


def test_dict_round_trip() -> None:
    """Test nodes convert to and from dictionaries"""
    node = BlockNode(
        name="columns",
        attributes={"align": "wide"},
        raw_inner_content="<div>...</div>",
        children=[BlockNode(name="column", source_format=SourceFormat.SELF_CLOSING)],
        is_valid=False
    )
    data = node.to_dict()

    assert data["source_format"] == "comment_block"
    assert data["children"][0]["source_format"] == "self_closing"
    assert BlockNode.from_dict(data) == node
