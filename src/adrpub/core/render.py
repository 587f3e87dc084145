"""HTML fragment rendering: recursive node-kind dispatch over the Node tree"""

from markdown_it import MarkdownIt

from adrpub.core.tree import Node, NodeKind, parse_tree


# kind -> (opening tag, closing tag) wrapped around the rendered children
WRAPPER_MAP: dict[NodeKind, tuple[str, str]] = {
    NodeKind.paragraph:   ('<p>', '</p>'),
    NodeKind.list:        ('<ul>', '</ul>'),
    NodeKind.list_item:   ('<li>', '</li>'),
    NodeKind.emphasis:    ('<span class="fst-italic">', '</span>'),
    NodeKind.strong:      ('<strong>', '</strong>'),
    NodeKind.block_quote: ('<blockquote class="blockquote">', '</blockquote>'),
}

FALLBACK_WRAPPER = ('<pre>', '</pre>')


def _wrapper(node: Node) -> tuple[str, str]:
    if node.kind == NodeKind.heading:
        return f'<h{node.depth}>', f'</h{node.depth}>'
    if node.kind == NodeKind.link:
        return f'<a href="{node.url}">', '</a>'
    return WRAPPER_MAP.get(node.kind, FALLBACK_WRAPPER)


def render_children(node: Node) -> str:
    return ''.join(render_node(child) for child in node.children)


def render_node(node: Node) -> str:
    """Render one node and its subtree. Unknown kinds fall back to <pre>."""
    if node.kind == NodeKind.text:
        return node.value or ''
    if node.kind == NodeKind.code:
        return f'<code>{node.value or ""}</code>'
    if node.kind == NodeKind.image:
        return f'<img src="{node.url}">'
    if node.kind == NodeKind.thematic_break:
        return '<hr>'
    if node.kind == NodeKind.root:
        return render_children(node)

    opening, closing = _wrapper(node)
    return f'{opening}{render_children(node)}{closing}'


def render_markdown(markdown: str, parser: MarkdownIt = None) -> str:
    """Parse markdown and render it as an HTML fragment. Raises ParseError."""
    return render_node(parse_tree(markdown, parser))
