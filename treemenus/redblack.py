"""Product inventory kept in a red-black tree keyed by code, with an interactive menu."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from treemenus.console import Console

TITLE = "Sistema de Inventário - Rubro-Negra"
MENU_ITEMS = (
    "Cadastrar produto",
    "Remover produto",
    "Buscar produto",
    "Listar todos os produtos",
)
_NAME_LIMIT = 49
_FLOAT_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class Color(Enum):
    """Colour of a red-black tree node; the value is its one-letter label."""

    RED = "R"
    BLACK = "B"


@dataclass(frozen=True)
class Product:
    """An inventory item."""

    code: int
    name: str
    quantity: int
    price: float


class _Node:
    __slots__ = ("product", "color", "left", "right", "parent")

    def __init__(self, product: Product) -> None:
        self.product = product
        self.color = Color.RED
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.parent: _Node | None = None


def _is_black(node: _Node | None) -> bool:
    return node is None or node.color is Color.BLACK


def _minimum(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


class RedBlackTree:
    """Red-black search tree of products keyed by code."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, y: _Node) -> None:
        x = y.left
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is None:
            self._root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x

    def _find(self, code: int) -> _Node | None:
        node = self._root
        while node is not None and node.product.code != code:
            node = node.left if code < node.product.code else node.right
        return node

    def insert(self, product: Product) -> bool:
        """Add a product; return False and change nothing if its code exists."""
        parent: _Node | None = None
        node = self._root
        while node is not None:
            if product.code == node.product.code:
                return False
            parent = node
            node = node.left if product.code < node.product.code else node.right
        new = _Node(product)
        new.parent = parent
        if parent is None:
            self._root = new
        elif product.code < parent.product.code:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        self._fix_insert(new)
        return True

    def _fix_insert(self, z: _Node) -> None:
        while z is not self._root and z.parent is not None and z.parent.color is Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle is not None and uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grand.left
                if uncle is not None and uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_left(z.parent.parent)
        if self._root is not None:
            self._root.color = Color.BLACK

    def _transplant(self, u: _Node, v: _Node | None) -> None:
        if u.parent is None:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        if v is not None:
            v.parent = u.parent

    def remove(self, code: int) -> bool:
        """Remove the product with this code; return whether one was removed."""
        z = self._find(code)
        if z is None:
            return False
        y = z
        original_color = y.color
        if z.left is None:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is None:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = _minimum(z.right)
            original_color = y.color
            x = y.right
            if y.parent is z:
                if x is not None:
                    x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                if y.right is not None:
                    y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            if y.left is not None:
                y.left.parent = y
            y.color = z.color
        self._size -= 1
        if original_color is Color.BLACK:
            self._fix_remove(x)
        return True

    def _fix_remove(self, x: _Node | None) -> None:
        while x is not self._root and _is_black(x):
            if x is None or x.parent is None:
                break
            if x is x.parent.left:
                w = x.parent.right
                if w is not None and w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if w is not None and _is_black(w.left) and _is_black(w.right):
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w is not None and _is_black(w.right):
                        if w.left is not None:
                            w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = x.parent.right
                    if w is not None:
                        w.color = x.parent.color
                        x.parent.color = Color.BLACK
                        if w.right is not None:
                            w.right.color = Color.BLACK
                        self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w is not None and w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if w is not None and _is_black(w.left) and _is_black(w.right):
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w is not None and _is_black(w.left):
                        if w.right is not None:
                            w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = x.parent.left
                    if w is not None:
                        w.color = x.parent.color
                        x.parent.color = Color.BLACK
                        if w.left is not None:
                            w.left.color = Color.BLACK
                        self._rotate_right(x.parent)
                    x = self._root
        if x is not None:
            x.color = Color.BLACK

    def search(self, code: int) -> Product | None:
        """Return the product with this code, or None."""
        node = self._find(code)
        return None if node is None else node.product

    def color_of(self, code: int) -> Color | None:
        """Colour of the node holding this code, or None if absent."""
        node = self._find(code)
        return None if node is None else node.color

    def root_code(self) -> int | None:
        """Code of the product at the root, or None when empty."""
        return None if self._root is None else self._root.product.code

    def items(self) -> Iterator[tuple[Product, Color]]:
        """Yield (product, colour) pairs in ascending code order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.product, node.color
            node = node.right

    def __iter__(self) -> Iterator[Product]:
        return (product for product, _ in self.items())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, code: object) -> bool:
        return isinstance(code, int) and self._find(code) is not None


def format_product(product: Product, color: Color) -> str:
    """Listing line for a product."""
    return (
        f"Código: {product.code:3d} | {product.name:<20} | Qtde: {product.quantity:3d} "
        f"| Preço: {product.price:8.2f} | Cor: {color.value}"
    )


def format_found(product: Product, color: Color) -> str:
    """Line shown when a product is found by search."""
    return (
        f"Encontrado: {product.code} | {product.name:<20} | Qtde: {product.quantity} "
        f"| Preço: {product.price:.2f} | Cor: {color.value}"
    )


def _read_name(console: Console, prompt: str) -> str:
    console.write(prompt)
    while True:
        line = console.read_line().lstrip()
        if line:
            return line[:_NAME_LIMIT]


def _read_float(console: Console, prompt: str) -> float:
    console.write(prompt)
    while True:
        line = console.read_line()
        if line.strip():
            break
    match = _FLOAT_PATTERN.match(line)
    if match is None:
        raise ValueError(f"not a number: {line!r}")
    return float(match.group(1))


def _register(console: Console, tree: RedBlackTree) -> None:
    try:
        code = console.read_int("Código: ")
        name = _read_name(console, "Nome: ")
        quantity = console.read_int("Quantidade: ")
        price = _read_float(console, "Preço unitário: ")
    except ValueError:
        console.write("Entrada inválida!\n")
        console.wait_enter()
        return
    tree.insert(Product(code, name, quantity, price))
    console.write("Produto cadastrado!\n")
    console.wait_enter()


def _remove_product(console: Console, tree: RedBlackTree) -> None:
    try:
        code = console.read_int("Código do produto a remover: ")
    except ValueError:
        console.write("Entrada inválida!\n")
        console.wait_enter()
        return
    tree.remove(code)
    console.write("Operação de remoção realizada.\n")
    console.wait_enter()


def _find_product(console: Console, tree: RedBlackTree) -> None:
    try:
        code = console.read_int("Código do produto a buscar: ")
    except ValueError:
        console.write("Entrada inválida!\n")
        console.wait_enter()
        return
    product = tree.search(code)
    if product is not None:
        console.write(format_found(product, tree.color_of(code)) + "\n")
    else:
        console.write("Produto não encontrado.\n")
    console.wait_enter()


def _list_products(console: Console, tree: RedBlackTree) -> None:
    console.write("\n--- Lista de Produtos (in-order) ---\n")
    for product, color in tree.items():
        console.write(format_product(product, color) + "\n")
    console.write("------------------------------------\n")
    console.wait_enter()


_ACTIONS = {1: _register, 2: _remove_product, 3: _find_product, 4: _list_products}


def run(console: Console, tree: RedBlackTree) -> None:
    """Run the interactive menu until the user quits or input ends."""
    try:
        while True:
            console.clear()
            option = console.menu(TITLE, MENU_ITEMS, True)
            if option == 0:
                return
            action = _ACTIONS.get(option)
            if action is None:
                console.write("Opção inválida!")
                console.wait_enter()
            else:
                action(console, tree)
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive inventory."""
    run(Console(), RedBlackTree())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())