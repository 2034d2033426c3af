"""User registry kept in an AVL tree ordered by name, with an interactive menu."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from treemenus.console import Console

TITLE = "Gerenciamento de Usuarios - AVL Tree"
MENU_ITEMS = (
    "Cadastrar Usuario",
    "Remover Usuario",
    "Buscar Usuario",
    "Listar Usuarios (ordem alfabetica)",
)


@dataclass(frozen=True)
class User:
    """A registered user."""

    name: str
    user_id: int
    email: str


@dataclass
class _Node:
    user: User
    height: int = 0
    left: _Node | None = None
    right: _Node | None = None


def _height(node: _Node | None) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(root: _Node) -> _Node:
    child = root.left
    root.left = child.right
    child.right = root
    _update(root)
    _update(child)
    return child


def _rotate_left(root: _Node) -> _Node:
    child = root.right
    root.right = child.left
    child.left = root
    _update(root)
    _update(child)
    return child


def _insert(node: _Node | None, user: User) -> _Node:
    if node is None:
        return _Node(user)
    name = user.name
    if name < node.user.name:
        node.left = _insert(node.left, user)
    elif name > node.user.name:
        node.right = _insert(node.right, user)
    else:
        return node

    _update(node)
    fb = _balance(node)
    if fb > 1 and name < node.left.user.name:
        return _rotate_right(node)
    if fb < -1 and name > node.right.user.name:
        return _rotate_left(node)
    if fb > 1 and name > node.left.user.name:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if fb < -1 and name < node.right.user.name:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _minimum(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _remove(node: _Node | None, name: str) -> _Node | None:
    if node is None:
        return None
    if name < node.user.name:
        node.left = _remove(node.left, name)
    elif name > node.user.name:
        node.right = _remove(node.right, name)
    elif node.left is None or node.right is None:
        node = node.left if node.left is not None else node.right
        if node is None:
            return None
    else:
        successor = _minimum(node.right)
        node.user = successor.user
        node.right = _remove(node.right, successor.user.name)

    _update(node)
    fb = _balance(node)
    if fb > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if fb < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """Self-balancing search tree of users keyed by name."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, name: str, user_id: int, email: str) -> bool:
        """Add a user; return False and change nothing if the name exists."""
        if name in self:
            return False
        self._root = _insert(self._root, User(name, user_id, email))
        self._size += 1
        return True

    def remove(self, name: str) -> bool:
        """Remove the user with this name; return whether one was removed."""
        if name not in self:
            return False
        self._root = _remove(self._root, name)
        self._size -= 1
        return True

    def search(self, name: str) -> User | None:
        """Return the user with this name, or None."""
        node = self._root
        while node is not None:
            if name == node.user.name:
                return node.user
            node = node.left if name < node.user.name else node.right
        return None

    def height(self) -> int:
        """Height of the tree; -1 when empty."""
        return _height(self._root)

    def __iter__(self) -> Iterator[User]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.user
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.search(name) is not None


def format_user(user: User) -> str:
    """One-line description of a user."""
    return f"Nome: {user.name} | ID: {user.user_id} | Email: {user.email}"


def _register(console: Console, tree: AVLTree) -> None:
    console.clear()
    name = console.read_word("Digite o nome: ")
    try:
        user_id = console.read_int("Digite o ID: ")
    except ValueError:
        console.write("\nID invalido!\n")
        console.wait_enter()
        return
    email = console.read_word("Digite o email: ")
    tree.insert(name, user_id, email)
    console.write("\nUsuario cadastrado com sucesso!\n")
    console.wait_enter()


def _remove_user(console: Console, tree: AVLTree) -> None:
    console.clear()
    name = console.read_word("Digite o nome do usuario a remover: ")
    tree.remove(name)
    console.write("\nUsuario removido (se existia)!\n")
    console.wait_enter()


def _find(console: Console, tree: AVLTree) -> None:
    console.clear()
    name = console.read_word("Digite o nome do usuario a buscar: ")
    user = tree.search(name)
    if user is not None:
        console.write("\nUsuario encontrado:\n")
        console.write(format_user(user) + "\n")
    else:
        console.write("\nUsuario nao encontrado.\n")
    console.wait_enter()


def _list(console: Console, tree: AVLTree) -> None:
    console.clear()
    console.write("Lista de usuarios (ordem alfabetica):\n\n")
    for user in tree:
        console.write(format_user(user) + "\n")
    console.wait_enter()


_ACTIONS = {1: _register, 2: _remove_user, 3: _find, 4: _list}


def run(console: Console, tree: AVLTree) -> None:
    """Run the interactive menu until the user quits or input ends."""
    try:
        while True:
            console.clear()
            option = console.menu(TITLE, MENU_ITEMS, True)
            if option == 0:
                return
            action = _ACTIONS.get(option)
            if action is None:
                console.write("Opcao invalida! Tente novamente.\n")
                console.wait_enter()
            else:
                action(console, tree)
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive user registry."""
    run(Console(), AVLTree())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())