# catalogo

A small interactive console catalogue. You register products during a session
and list them. Each product has a code, a name, a description, a stock, a
price and a category.

## Installation

```
pip install .
```

## Usage

Start the menu:

```
catalogo
```

The same menu also starts with `python -m catalogo.menu`.

The main menu offers:

```
*** Menu principal ***
1) Alta Producto
2) Listar Productos
0) Salir
```

- **1) Alta Producto** asks for a product code. If a product with that code
  already exists, the program prints `Ya existe el producto. Imposible
  continuar...` and returns to the menu. If not, it asks for the name,
  description, stock (an integer) and price (a number), and then for a
  category number. It shows the category list and asks again until the
  number given is a valid category. If the stock or price cannot be read as a
  number, it prints `Valor invalido` and returns to the menu without
  registering anything.
- **2) Listar Productos** prints each registered product, in the order they
  were registered, as
  `codigo - nombre - descripcion - stock - precio - categoria`. The price is
  shown with two decimals. If there are no products, it prints
  `No existen productos en el sistema.`
- **0) Salir** ends the program and prints `Fin del programa`.

Any other answer prints `Opcion desconocida`. Input is read as
whitespace-separated words, so each answer is a single word, and several
answers may be given on one line. The menu also ends, printing
`Fin del programa`, when input runs out.

Available categories:

| Number | Category         |
|--------|------------------|
| 0      | Ropa             |
| 1      | Electrodomestico |
| 2      | Otros            |

## Using it from Python

`catalogo.menu.Menu` takes a controller, an input stream and an output
stream. All three are optional. By default it uses a `ProductoController` on
the shared `Sistema` and standard input and output.

```python
import io

from catalogo.controlador import ProductoController
from catalogo.menu import Menu
from catalogo.sistema import Sistema

entrada = io.StringIO("1 P01 Remera Algodon 10 250.5 0 2 0\n")
salida = io.StringIO()
Menu(ProductoController(Sistema()), entrada, salida).mostrar_menu()
print(salida.getvalue())
```

`Menu` also has `alta_producto()`, `listar_productos()` and
`listar_categorias()`, which run a single step. `listar_categorias()` prints
the category table.

The other modules can be used directly:

- `catalogo.categoria` provides the `Categoria` enumeration (`ROPA`,
  `ELECTRODOMESTICO`, `OTROS`, each with a `nombre` property), as well as
  `verificar_categoria(valor)`, `nombre_categoria(valor)` (which returns `""`
  for an unknown number) and `categorias()` (a dict from number to name).
- `catalogo.producto` provides `Producto`, whose `str()` is the listing line,
  with `desde_dto()` and `a_dto()`, and `ProductoDTO`, a frozen dataclass with
  the same fields.
- `catalogo.sistema.Sistema` holds the `productos` list.
  `Sistema.instancia()` returns one shared instance.
- `catalogo.controlador.ProductoController` offers
  `verificar_codigo(codigo)`, `agregar_producto(dto)` and
  `obtener_productos()`. `agregar_producto` raises `ValueError` when given
  `None`.

## Limitations

Products are kept in memory only. Nothing is saved when the program exits.
Products cannot be edited or removed once they are registered.

## Running the tests

```
pip install ".[test]"
pytest
```