"""Local configuration for nametree."""

from __future__ import annotations

import os


DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HTML_PARSER = "lxml"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_USER_AGENT = "nametree/0.1"

NAMETREE_LOG_LEVEL = os.getenv("NAMETREE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
# BeautifulSoup tree builder used by nametree.builders.tree_from_html.
NAMETREE_HTML_PARSER = os.getenv("NAMETREE_HTML_PARSER", DEFAULT_HTML_PARSER)
NAMETREE_FETCH_TIMEOUT_S = float(os.getenv("NAMETREE_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
NAMETREE_USER_AGENT = os.getenv("NAMETREE_USER_AGENT", DEFAULT_USER_AGENT)
