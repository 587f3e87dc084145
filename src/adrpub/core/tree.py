"""Node tree: markdown-it-py syntax tree adapted into typed, immutable nodes"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode


class ParseError(ValueError):
    """Raised when markdown-it-py cannot build a parser for, or parse, a document."""


class NodeKind(str, Enum):
    root                = "root"
    text                = "text"
    heading             = "heading"
    paragraph           = "paragraph"
    link                = "link"
    image               = "image"
    code                = "code"
    list                = "list"
    list_item           = "list_item"
    emphasis            = "emphasis"
    strong              = "strong"
    block_quote         = "block_quote"
    thematic_break      = "thematic_break"
    raw_html            = "raw_html"
    footnote_reference  = "footnote_reference"
    footnote_definition = "footnote_definition"
    table               = "table"
    table_row           = "table_row"
    table_cell          = "table_cell"
    break_              = "break"
    delete              = "delete"
    other               = "other"


@dataclass(frozen=True)
class Node:
    """One node of a parsed document. Only the fields relevant to `kind` are set."""
    kind:     NodeKind
    children: tuple["Node", ...] = ()
    value:    Optional[str] = None    # text, code and raw html content
    url:      Optional[str] = None    # link href / image src
    depth:    Optional[int] = None    # heading level (1-6)
    ordered:  bool = False            # ordered list marker


# markdown-it node types whose children are lifted into the parent
TRANSPARENT_TYPES = {'inline', 'thead', 'tbody'}

CONTAINER_KIND_MAP: dict[str, NodeKind] = {
    'root':           NodeKind.root,
    'paragraph':      NodeKind.paragraph,
    'bullet_list':    NodeKind.list,
    'ordered_list':   NodeKind.list,
    'list_item':      NodeKind.list_item,
    'em':             NodeKind.emphasis,
    'strong':         NodeKind.strong,
    'blockquote':     NodeKind.block_quote,
    'table':          NodeKind.table,
    'tr':             NodeKind.table_row,
    'th':             NodeKind.table_cell,
    'td':             NodeKind.table_cell,
    's':              NodeKind.delete,
    'footnote_ref':   NodeKind.footnote_reference,
    'footnote':       NodeKind.footnote_definition,
}

LEAF_VALUE_MAP: dict[str, NodeKind] = {
    'text':        NodeKind.text,
    'code_inline': NodeKind.code,
    'html_block':  NodeKind.raw_html,
    'html_inline': NodeKind.raw_html,
}


def _heading_depth(tag: str) -> int:
    """Heading level from an 'h1'..'h6' tag."""
    return int(tag[1:])


def _strip_newline(content: str) -> str:
    """Drop the single trailing newline markdown-it keeps on block content."""
    return content[:-1] if content.endswith('\n') else content


def _convert_children(node: SyntaxTreeNode) -> tuple[Node, ...]:
    out: list[Node] = []
    for child in node.children:
        if child.type in TRANSPARENT_TYPES:
            out.extend(_convert_children(child))
        else:
            out.append(_convert(child))
    return tuple(out)


def _convert(node: SyntaxTreeNode) -> Node:
    t = node.type
    if t in LEAF_VALUE_MAP:
        return Node(LEAF_VALUE_MAP[t], value=node.content)
    if t == 'softbreak':
        return Node(NodeKind.text, value='\n')
    if t == 'hardbreak':
        return Node(NodeKind.break_)
    if t in ('fence', 'code_block'):
        return Node(NodeKind.code, value=_strip_newline(node.content))
    if t == 'hr':
        return Node(NodeKind.thematic_break)
    # markdown-it percent-encodes link and image destinations
    if t == 'image':
        return Node(NodeKind.image, url=node.attrs.get('src', ''))
    if t == 'heading':
        return Node(NodeKind.heading, _convert_children(node), depth=_heading_depth(node.tag))
    if t == 'link':
        return Node(NodeKind.link, _convert_children(node), url=node.attrs.get('href', ''))
    if t in CONTAINER_KIND_MAP:
        return Node(CONTAINER_KIND_MAP[t], _convert_children(node), ordered=t == 'ordered_list')
    return Node(NodeKind.other, _convert_children(node))


def make_parser(preset: str = 'commonmark') -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    try:
        return MarkdownIt(preset, options_update={"linkify": False})
    except Exception as e:
        raise ParseError(f"Cannot build markdown parser for preset {preset!r}: {e}") from e


def parse_tree(markdown: str, parser: MarkdownIt = None) -> Node:
    """Parse markdown text into a Node tree rooted at a `root` node."""
    parser = parser or make_parser()
    try:
        tokens = parser.parse(markdown)
        return _convert(SyntaxTreeNode(tokens))
    except Exception as e:
        raise ParseError(f"Error while parsing markdown: {e}") from e
