"""Product entity and the data object used to move it between layers."""

from __future__ import annotations

from dataclasses import dataclass

from catalogo.categoria import Categoria


@dataclass(frozen=True)
class ProductoDTO:
    """Plain product data passed between presentation and business logic."""

    codigo: str
    stock: int
    precio: float
    nombre: str
    descripcion: str
    categoria: Categoria


@dataclass(eq=False)
class Producto:
    """A product held in the system."""

    codigo: str
    stock: int
    precio: float
    nombre: str
    descripcion: str
    categoria: Categoria

    def __str__(self) -> str:
        return (
            f"{self.codigo} - {self.nombre} - {self.descripcion} - "
            f"{self.stock} - {self.precio:.2f} - {self.categoria.nombre}"
        )

    @classmethod
    def desde_dto(cls, dto: ProductoDTO) -> Producto:
        """Build a product from its data object."""
        return cls(
            dto.codigo,
            dto.stock,
            dto.precio,
            dto.nombre,
            dto.descripcion,
            dto.categoria,
        )

    def a_dto(self) -> ProductoDTO:
        """Return the product's data object."""
        return ProductoDTO(
            self.codigo,
            self.stock,
            self.precio,
            self.nombre,
            self.descripcion,
            self.categoria,
        )