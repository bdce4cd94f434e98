import pytest

from ktlintpy.cst import SyntaxNode, SyntaxToken, TreeBuilder, walk_preorder
from ktlintpy.parser import parse
from ktlintpy.syntax import SyntaxKind


def _tokens_by_text(root: SyntaxNode, text: str) -> list[SyntaxToken]:
    return [token for token in root.descendants_tokens() if token.text == text]


def test_offsets_and_lengths() -> None:
    root = parse("ab { cd }").root

    (brace_node,) = root.child_nodes()
    (cd,) = _tokens_by_text(root, "cd")

    assert root.start_offset == 0
    assert root.text_length == 9
    assert brace_node.start_offset == 3
    assert brace_node.text == "{ cd }"
    assert cd.start_offset == 5
    assert cd.text_range.as_tuple() == (5, 7)
    assert cd.end_offset == 7


def test_offsets_follow_mutations() -> None:
    root = parse("a;b { c }").root
    (semicolon,) = _tokens_by_text(root, ";")
    (c,) = _tokens_by_text(root, "c")

    assert c.start_offset == 6
    semicolon.detach()

    assert semicolon.parent is None
    assert semicolon.start_offset == 0
    assert c.start_offset == 5
    assert root.text == "ab { c }"

    c.replace_text("ccc")
    assert root.text_length == 10
    assert root.text == "ab { ccc }"


def test_insert_and_replace_children() -> None:
    root = parse("a b").root
    (a,) = _tokens_by_text(root, "a")
    (b,) = _tokens_by_text(root, "b")

    root.insert_child(0, SyntaxToken(SyntaxKind.BLOCK_COMMENT, "/**/"))
    assert root.text == "/**/a b"
    assert b.start_offset == 6
    assert a.index_in_parent == 1

    b.replace_with(SyntaxToken(SyntaxKind.IDENTIFIER, "bee"))
    assert root.text == "/**/a bee"
    assert b.parent is None


def test_insert_rejects_attached_child_and_cycles() -> None:
    root = parse("{ a }").root
    (block,) = root.child_nodes()
    (a,) = _tokens_by_text(root, "a")

    with pytest.raises(ValueError, match="already attached"):
        root.append_child(a)

    block.detach()
    with pytest.raises(ValueError, match="own subtree"):
        block.append_child(block)


def test_sibling_and_leaf_navigation() -> None:
    root = parse("x\n  { y } // z").root
    (comment,) = [token for token in root.descendants_tokens() if token.is_comment]
    (y,) = _tokens_by_text(root, "y")

    newline = comment.prev_leaf(lambda token: token.is_whitespace and "\n" in token.text)
    assert newline is not None
    assert newline.text == "\n  "

    assert y.prev_leaf() is not None
    assert y.prev_leaf().text == " "
    assert y.next_leaf(lambda token: not token.is_whitespace).text == "}"
    assert comment.next_leaf() is None
    assert root.prev_leaf() is None


def test_walk_preorder_visits_parents_before_children() -> None:
    root = parse("a(b)c").root
    seen: list[str] = []

    walk_preorder(root, lambda element: seen.append(element.kind.name if element.children else element.text))

    assert seen == ["FILE", "a", "PARENTHESIZED", "(", "b", ")", "c"]


def test_walk_preorder_reads_children_after_visit() -> None:
    root = parse("(a)").root
    seen: list[str] = []

    def visit(element):
        seen.append(element.text)
        if element.kind == SyntaxKind.PARENTHESIZED:
            element.append_child(SyntaxToken(SyntaxKind.IDENTIFIER, "late"))

    walk_preorder(root, visit)

    assert "late" in seen


def test_tree_builder_wraps_loose_elements_in_file_node() -> None:
    builder = TreeBuilder()
    builder.token(SyntaxKind.IDENTIFIER, "a")
    builder.start_node(SyntaxKind.BLOCK)
    builder.token(SyntaxKind.LBRACE, "{")
    builder.token(SyntaxKind.RBRACE, "}")
    builder.finish_node()

    root = builder.finish()

    assert root.kind == SyntaxKind.FILE
    assert root.text == "a{}"
    assert builder.depth == 0


def test_tree_builder_rejects_unbalanced_nodes() -> None:
    builder = TreeBuilder()
    with pytest.raises(RuntimeError):
        builder.finish_node()

    builder.start_node(SyntaxKind.BLOCK)
    with pytest.raises(RuntimeError):
        builder.finish()


def test_kind_validation() -> None:
    with pytest.raises(ValueError):
        SyntaxToken(SyntaxKind.BLOCK, "x")
    with pytest.raises(ValueError):
        SyntaxNode(SyntaxKind.IDENTIFIER)
