"""Use-case controller for products."""

from __future__ import annotations

from catalogo.producto import Producto, ProductoDTO
from catalogo.sistema import Sistema


class ProductoController:
    """Registers and lists products held by a system."""

    def __init__(self, sistema: Sistema | None = None) -> None:
        self.sistema = sistema if sistema is not None else Sistema.instancia()

    def verificar_codigo(self, codigo: str) -> bool:
        """Return True if a product with ``codigo`` already exists."""
        return any(producto.codigo == codigo for producto in self.sistema.productos)

    def agregar_producto(self, producto: ProductoDTO) -> None:
        """Store a new product built from ``producto``."""
        if producto is None:
            raise ValueError("no product given")
        self.sistema.productos.append(Producto.desde_dto(producto))

    def obtener_productos(self) -> list[ProductoDTO]:
        """Return the data of every stored product."""
        return [producto.a_dto() for producto in self.sistema.productos]