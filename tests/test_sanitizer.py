"""Content sanitization tests"""
from wp_blocks import sanitize_block_content


def test_removes_script_tags() -> None:
    """Test script elements are removed"""
    content = '<p>Safe content</p><script>alert("danger")</script>'
    assert sanitize_block_content(content) == '<p>Safe content</p>'


def test_removes_multiline_scripts() -> None:
    """Test script elements spanning lines are removed"""
    content = '<p>a</p><SCRIPT type="text/javascript">\nrun();\n</SCRIPT><p>b</p>'
    assert sanitize_block_content(content) == '<p>a</p><p>b</p>'


def test_removes_event_handlers() -> None:
    """Test inline event handlers are removed"""
    content = '<button onclick="alert()">Click me</button>'
    assert sanitize_block_content(content) == '<button>Click me</button>'
    assert sanitize_block_content("<img src=\"a.png\" onError='x()'>") == '<img src="a.png">'


def test_removes_javascript_urls() -> None:
    """Test javascript: URLs are removed"""
    content = '<a href="javascript:alert()">Link</a>'
    assert sanitize_block_content(content) == '<a href="">Link</a>'


def test_leaves_safe_content() -> None:
    """Test ordinary block markup is untouched"""
    content = '<!-- wp:paragraph -->\n<p class="one">Fine</p>\n<!-- /wp:paragraph -->'
    assert sanitize_block_content(content) == content
