"""
bemjson-md: Markdown constructs to BEMJSON document nodes

A renderer-side adapter for markdown parsers. The parser reports each
construct (heading, list, link, ...) and gets back a uniform, immutable
document node for a template layer to render. No markdown is parsed here.

Quick Start:
    >>> from bemjson_md import default_rules, to_data
    >>> rules = default_rules()
    >>> para = rules["paragraph"](["Hello ", rules["strong"]("World")])
    >>> to_data(para)
    {'elem': 'p', 'content': ['Hello ', {'elem': 'strong', 'content': ['World']}]}

    >>> # Tag mode mirrors literal markup as well
    >>> rules = default_rules({"tag": True})
    >>> rules["br"]().bem
    False

Installation:
    pip install bemjson-md            # Core (zero deps)
    pip install bemjson-md[syntax]    # + Syntax highlighting via Rosettes
"""

from bemjson_md.builder import NodeBuilder
from bemjson_md.config import RulesConfig
from bemjson_md.errors import BemjsonError, ConfigError
from bemjson_md.escaping import escape_html, escape_text_nodes
from bemjson_md.highlighting import (
    HighlightHook,
    Highlighter,
    RosettesHighlighter,
    call_highlighter,
    has_rosettes,
)
from bemjson_md.nodes import Content, DocumentNode, Item, RawHtml
from bemjson_md.rules import RULE_METHODS, Rules, default_rules
from bemjson_md.serialization import from_json, to_data, to_dict, to_json
from bemjson_md.visitor import find_all, iter_nodes, walk

__version__ = "0.1.0"

__all__ = [
    # Building
    "NodeBuilder",
    "RULE_METHODS",
    "Rules",
    "RulesConfig",
    "default_rules",
    # Nodes
    "Content",
    "DocumentNode",
    "Item",
    "RawHtml",
    # Escaping
    "escape_html",
    "escape_text_nodes",
    # Highlighting
    "HighlightHook",
    "Highlighter",
    "RosettesHighlighter",
    "call_highlighter",
    "has_rosettes",
    # Serialization and traversal
    "find_all",
    "from_json",
    "iter_nodes",
    "to_data",
    "to_dict",
    "to_json",
    "walk",
    # Errors
    "BemjsonError",
    "ConfigError",
    "__version__",
]
