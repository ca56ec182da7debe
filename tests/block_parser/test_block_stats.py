from wp_blocks.block_parser.core.block_node import BlockNode
from wp_blocks.block_parser.filtering.block_stats import count_blocks, get_block_type_stats


def test_counts_nested_blocks() -> None:
    """Test block type counts include nested blocks"""
    blocks = [
        BlockNode(name="paragraph"),
        BlockNode(
            name="columns",
            children=[
                BlockNode(name="column", children=[BlockNode(name="paragraph")])
            ]
        )
    ]

    assert get_block_type_stats(blocks) == {"paragraph": 2, "columns": 1, "column": 1}
    assert count_blocks(blocks) == (4, {"paragraph": 2, "columns": 1, "column": 1})


def test_empty_tree() -> None:
    """Test counting an empty tree"""
    assert count_blocks([]) == (0, {})


def test_walk_order() -> None:
    """Test nodes are visited in document order"""
    tree = BlockNode(
        name="a",
        children=[
            BlockNode(name="b", children=[BlockNode(name="c")]),
            BlockNode(name="d")
        ]
    )

    assert [n.name for n in tree.walk()] == ["a", "b", "c", "d"]
