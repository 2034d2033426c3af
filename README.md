# treemenus

Two small interactive console programs. Each is built on a self-balancing
binary search tree:

- **AVL user registry** (`treemenus.avl`): users are kept in an AVL tree
  ordered by name.
- **Red-black inventory** (`treemenus.redblack`): products are kept in a
  red-black tree ordered by product code.

The menus and messages are in Portuguese.

## Installation

```
pip install .
```

## Running

```
treemenus-avl
```

This opens the "Gerenciamento de Usuarios - AVL Tree" menu:

```
[ 1 ] - Cadastrar Usuario
[ 2 ] - Remover Usuario
[ 3 ] - Buscar Usuario
[ 4 ] - Listar Usuarios (ordem alfabetica)
[ 0 ] - Sair
```

When you register a user, the program reads the name and the e-mail as single
words. The ID must be an integer.

```
treemenus-redblack
```

This opens the "Sistema de Inventário - Rubro-Negra" menu, with these options:

```
[ 1 ] - Cadastrar produto
[ 2 ] - Remover produto
[ 3 ] - Buscar produto
[ 4 ] - Listar todos os produtos
[ 0 ] - Sair
```

A product has four fields:

- an integer code
- a name, which may contain spaces and is cut to 49 characters
- an integer quantity
- a price

The listing shows each product in code order, with the colour of its node
(`R` or `B`).

Both programs clear the screen before each menu. They use `clear`, or `cls`
on Windows.

Typing a number that is not on the menu prints an invalid-option message. So
does typing something that is not a number.

A program stops when you choose `0` or when its input ends.

You can also start the programs with `python -m treemenus.avl` and
`python -m treemenus.redblack`.

## Using the trees from Python

```python
from treemenus.avl import AVLTree, format_user

users = AVLTree()
users.insert("alice", 1, "alice@example.com")
users.insert("bob", 2, "bob@example.com")
print(format_user(users.search("alice")))
# Nome: alice | ID: 1 | Email: alice@example.com
users.remove("bob")
print(len(users), users.height(), "alice" in users)
for user in users:          # users in name order
    print(user.name, user.user_id, user.email)
```

```python
from treemenus.redblack import Product, RedBlackTree, format_product

stock = RedBlackTree()
stock.insert(Product(code=10, name="Widget", quantity=5, price=2.5))
stock.insert(Product(code=20, name="Gadget", quantity=1, price=9.9))
for product, color in stock.items():
    print(format_product(product, color))
print(stock.root_code(), stock.color_of(20), 10 in stock)
stock.remove(10)
```

`insert` returns `False` when the tree already holds that name or code, and
the tree is left as it was. `remove` returns `False` when the key is absent,
and nothing changes. `search` returns the stored `User` or `Product`, or
`None`.

### Driving the menus from other streams

`treemenus.console.Console` reads from and writes to any pair of text
streams. Pass `clear_screen=False` to stop it from clearing the terminal.
Then `run` can be driven from a script:

```python
import io
from treemenus.console import Console
from treemenus.avl import AVLTree, run

out = io.StringIO()
tree = AVLTree()
run(Console(io.StringIO("1\nalice\n1\nalice@example.com\n\n0\n"), out, clear_screen=False), tree)
print(len(tree))  # 1
```

`render_menu(title, items, quit)` returns the text of a menu without printing
it.

## What it does not do

The data lives only in memory, for as long as the program runs. Nothing is
saved to or loaded from disk, and nothing is shared between the two programs.

## Tests

```
pip install .[test]
pytest
```