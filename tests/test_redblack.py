import io
import random

import pytest

from treemenus.console import Console
from treemenus.redblack import (
    Color,
    Product,
    RedBlackTree,
    format_found,
    format_product,
    run,
)


def _product(code: int) -> Product:
    return Product(code, f"item{code}", code % 7, code * 1.5)


def _black_height(node) -> int:
    if node is None:
        return 1
    left = _black_height(node.left)
    right = _black_height(node.right)
    assert left == right
    return left + (1 if node.color is Color.BLACK else 0)


def _no_red_red(node) -> bool:
    if node is None:
        return True
    if node.color is Color.RED:
        for child in (node.left, node.right):
            if child is not None and child.color is Color.RED:
                return False
    return _no_red_red(node.left) and _no_red_red(node.right)


def _parents_consistent(node, parent=None) -> bool:
    if node is None:
        return True
    if node.parent is not parent:
        return False
    return _parents_consistent(node.left, node) and _parents_consistent(node.right, node)


def _build(codes):
    tree = RedBlackTree()
    for code in codes:
        tree.insert(_product(code))
    return tree


def _console(text: str):
    out = io.StringIO()
    return Console(io.StringIO(text), out, clear_screen=False), out


def test_empty_tree():
    tree = RedBlackTree()
    assert len(tree) == 0
    assert tree.root_code() is None
    assert list(tree) == []
    assert tree.search(1) is None
    assert tree.color_of(1) is None
    assert 1 not in tree


@pytest.mark.parametrize("codes", [range(1, 50), range(50, 0, -1), [5, 3, 8, 1, 4, 7, 9]])
def test_insert_keeps_red_black_properties(codes):
    tree = _build(codes)
    assert tree.color_of(tree.root_code()) is Color.BLACK
    assert _no_red_red(tree._root)
    assert _black_height(tree._root) >= 1
    assert _parents_consistent(tree._root)
    assert [p.code for p in tree] == sorted(codes)
    assert len(tree) == len(list(codes))


def test_random_inserts_sorted_and_balanced():
    rng = random.Random(42)
    codes = rng.sample(range(1000), 300)
    tree = _build(codes)
    assert [p.code for p in tree] == sorted(codes)
    assert _no_red_red(tree._root)
    _black_height(tree._root)
    assert all(code in tree for code in codes)


def test_single_insert_is_black_root():
    tree = RedBlackTree()
    assert tree.insert(Product(10, "Caneta", 3, 1.25)) is True
    assert tree.root_code() == 10
    assert tree.color_of(10) is Color.BLACK


def test_duplicate_code_is_ignored():
    tree = RedBlackTree()
    tree.insert(Product(1, "first", 1, 1.0))
    assert tree.insert(Product(1, "second", 2, 2.0)) is False
    assert len(tree) == 1
    assert tree.search(1).name == "first"


def test_remove_missing_returns_false():
    tree = _build([1, 2, 3])
    assert tree.remove(99) is False
    assert len(tree) == 3
    assert [p.code for p in tree] == [1, 2, 3]


def test_remove_root_with_two_children():
    tree = _build([1, 2, 3, 4, 5])
    root = tree.root_code()
    assert tree.remove(root) is True
    assert root not in tree
    assert [p.code for p in tree] == sorted({1, 2, 3, 4, 5} - {root})
    assert tree.color_of(tree.root_code()) is Color.BLACK


def test_random_removals_keep_order_and_colors():
    rng = random.Random(7)
    codes = rng.sample(range(500), 200)
    tree = _build(codes)
    remaining = set(codes)
    for code in rng.sample(codes, 120):
        assert tree.remove(code) is True
        remaining.discard(code)
        assert [p.code for p in tree] == sorted(remaining)
        assert _no_red_red(tree._root)
        assert _parents_consistent(tree._root)
        assert tree.color_of(tree.root_code()) is Color.BLACK
    assert len(tree) == len(remaining)


def test_remove_everything():
    codes = list(range(1, 30))
    tree = _build(codes)
    for code in codes:
        assert tree.remove(code) is True
    assert len(tree) == 0
    assert tree.root_code() is None
    assert list(tree) == []


def test_items_pairs_match_color_of():
    tree = _build(range(1, 20))
    for product, color in tree.items():
        assert tree.color_of(product.code) is color
        assert tree.search(product.code) == product


def test_format_product():
    line = format_product(Product(7, "Caneta", 10, 2.5), Color.RED)
    assert line == "Código:   7 | Caneta               | Qtde:  10 | Preço:     2.50 | Cor: R"


def test_format_found():
    line = format_found(Product(7, "Caneta", 10, 2.5), Color.BLACK)
    assert line == "Encontrado: 7 | Caneta               | Qtde: 10 | Preço: 2.50 | Cor: B"


def test_run_register_and_list():
    console, out = _console("1\n5\nCaneta azul\n10\n2.5\n\n4\n\n0\n")
    tree = RedBlackTree()
    run(console, tree)
    product = tree.search(5)
    assert product == Product(5, "Caneta azul", 10, 2.5)
    text = out.getvalue()
    assert "Produto cadastrado!" in text
    assert format_product(product, Color.BLACK) in text


def test_run_remove():
    console, out = _console("2\n3\n\n0\n")
    tree = _build([1, 2, 3])
    run(console, tree)
    assert 3 not in tree
    assert "Operação de remoção realizada." in out.getvalue()


def test_run_search_found_and_missing():
    console, out = _console("3\n2\n\n3\n99\n\n0\n")
    tree = _build([1, 2, 3])
    run(console, tree)
    text = out.getvalue()
    assert format_found(tree.search(2), tree.color_of(2)) in text
    assert "Produto não encontrado." in text


def test_run_invalid_option_and_eof():
    console, out = _console("8\n\n")
    tree = RedBlackTree()
    run(console, tree)
    assert "Opção inválida!" in out.getvalue()
    assert len(tree) == 0


def test_run_name_truncated():
    long_name = "x" * 60
    console, _ = _console(f"1\n1\n{long_name}\n1\n1\n\n0\n")
    tree = RedBlackTree()
    run(console, tree)
    assert tree.search(1).name == long_name[:49]