"""Interactive text menu for managing products."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from catalogo.categoria import Categoria, categorias, verificar_categoria
from catalogo.controlador import ProductoController
from catalogo.producto import Producto, ProductoDTO


def _palabras(entrada: TextIO) -> Iterator[str]:
    for linea in entrada:
        yield from linea.split()


class Menu:
    """Main menu reading whitespace-separated answers from ``entrada``."""

    def __init__(
        self,
        controlador: ProductoController | None = None,
        entrada: TextIO | None = None,
        salida: TextIO | None = None,
    ) -> None:
        self.controlador = controlador if controlador is not None else ProductoController()
        self._palabras = _palabras(entrada if entrada is not None else sys.stdin)
        self.salida = salida if salida is not None else sys.stdout

    def _escribir(self, texto: str = "") -> None:
        print(texto, file=self.salida)

    def _leer(self) -> str:
        try:
            return next(self._palabras)
        except StopIteration:
            raise EOFError("no more input") from None

    def mostrar_menu(self) -> None:
        """Run the menu until the user chooses to quit or input ends."""
        while True:
            self._escribir("*** Menu principal ***")
            self._escribir("1) Alta Producto")
            self._escribir("2) Listar Productos")
            self._escribir("0) Salir ")
            self._escribir("Ingrese una opcion: ")
            try:
                palabra = self._leer()
            except EOFError:
                break
            try:
                opcion = int(palabra)
            except ValueError:
                opcion = None

            if opcion == 0:
                break
            if opcion == 1:
                try:
                    self.alta_producto()
                except EOFError:
                    break
                except ValueError:
                    self._escribir("Valor invalido")
            elif opcion == 2:
                self.listar_productos()
            else:
                self._escribir("Opcion desconocida")
        self._escribir("Fin del programa")

    def alta_producto(self) -> None:
        """Ask for a new product and register it unless its code exists."""
        self._escribir("Ingrese codigo:")
        codigo = self._leer()
        if self.controlador.verificar_codigo(codigo):
            self._escribir("Ya existe el producto. Imposible continuar...")
            return
        self.controlador.agregar_producto(self._ingresar_producto(codigo))
        self._escribir("Fin ingreso de producto ")

    def _ingresar_producto(self, codigo: str) -> ProductoDTO:
        self._escribir("Ingresar nombre:")
        nombre = self._leer()
        self._escribir("Ingresar descripcion:")
        descripcion = self._leer()
        self._escribir("Ingresar stock:")
        stock = int(self._leer())
        self._escribir("Ingresar precio:")
        precio = float(self._leer())

        while True:
            self._escribir("Ingresar numero de categoria:")
            for numero, nombre_cat in categorias().items():
                self._escribir(f"{numero} - {nombre_cat}")
            self._escribir()
            self._escribir("Categoria:")
            try:
                valor = int(self._leer())
            except ValueError:
                valor = None
            if valor is not None and verificar_categoria(valor):
                break
            self._escribir("La categoria seleccionada no existe. Seleccione una diferente")

        return ProductoDTO(codigo, stock, precio, nombre, descripcion, Categoria(valor))

    def listar_productos(self) -> None:
        """Print every product in the system."""
        productos = self.controlador.obtener_productos()
        if not productos:
            self._escribir("No existen productos en el sistema.")
            self._escribir()
            return
        self._escribir("Estos son todos los productos en el sistema:")
        self._escribir()
        for dto in productos:
            self._escribir(str(Producto.desde_dto(dto)))

    def listar_categorias(self) -> None:
        """Print every product category."""
        self._escribir("Todas las categorias de productos:")
        for numero, nombre in categorias().items():
            self._escribir(f"{numero} - {nombre}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    Menu().mostrar_menu()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())