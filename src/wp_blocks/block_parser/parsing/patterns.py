import re

# Marker literals
COMMENT_OPEN = '<!--'
COMMENT_CLOSE = '-->'
SELF_CLOSE = '/-->'
OPEN_PREFIX = 'wp:'
CLOSE_PREFIX = '/wp:'

# Flexible content layout key
ACF_LAYOUT_KEY = 'acf_fc_layout'

# Sanitizer patterns
SCRIPT_PATTERN = re.compile(r'<script[^>]*>.*?</script>', re.IGNORECASE | re.DOTALL)
EVENT_HANDLER_PATTERN = re.compile(r'''\s*\bon\w+\s*=\s*(?:"[^"]*"|'[^']*')''', re.IGNORECASE)
JAVASCRIPT_URL_PATTERN = re.compile(r'''javascript:[^"'\s>]*''', re.IGNORECASE)
