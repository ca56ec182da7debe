import json
import logging

import pytest

from wp_blocks import BlockParser

# Test Data Constants
SIMPLE_CONTENT = """
    <!-- wp:paragraph -->
    <p>Hello World</p>
    <!-- /wp:paragraph -->

    <!-- wp:heading {"level":2} -->
    <h2>Test Heading</h2>
    <!-- /wp:heading -->
"""

NESTED_CONTENT = """
    <!-- wp:columns -->
    <div class="wp-block-columns">
      <!-- wp:column -->
      <div class="wp-block-column">
        <!-- wp:paragraph -->
        <p>Column 1 content</p>
        <!-- /wp:paragraph -->
      </div>
      <!-- /wp:column -->
    </div>
    <!-- /wp:columns -->
"""

MIXED_CONTENT = """<!-- wp:heading {"level":2} -->
<h2>Title</h2>
<!-- /wp:heading -->

<!-- wp:separator /-->

<!-- wp:columns -->
<div class="wp-block-columns"><!-- wp:column -->
<div class="wp-block-column"><p>x</p></div>
<!-- /wp:column --></div>
<!-- /wp:columns -->"""

FLEXIBLE_CONTENT = json.dumps([
    {"acf_fc_layout": "hero", "title": "x"},
    {"acf_fc_layout": "text"}
])


# Basic Test Configuration
@pytest.fixture(autouse=True)
def setup_logging() -> None:
    """Configure logging for tests"""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s [%(levelname)s] %(message)s',
        handlers=[logging.StreamHandler()]
    )


@pytest.fixture
def parser() -> BlockParser:
    """Parser with default options"""
    return BlockParser()


@pytest.fixture
def simple_content() -> str:
    return SIMPLE_CONTENT


@pytest.fixture
def nested_content() -> str:
    return NESTED_CONTENT


@pytest.fixture
def mixed_content() -> str:
    return MIXED_CONTENT


@pytest.fixture
def flexible_content() -> str:
    return FLEXIBLE_CONTENT
