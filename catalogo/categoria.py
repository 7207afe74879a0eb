"""Product categories known to the catalogue."""

from __future__ import annotations

from enum import IntEnum


class Categoria(IntEnum):
    """A product category, identified by its number."""

    ROPA = 0
    ELECTRODOMESTICO = 1
    OTROS = 2

    @property
    def nombre(self) -> str:
        """Display name of the category."""
        return _NOMBRES[self]


_NOMBRES = {
    Categoria.ROPA: "Ropa",
    Categoria.ELECTRODOMESTICO: "Electrodomestico",
    Categoria.OTROS: "Otros",
}


def verificar_categoria(valor: int) -> bool:
    """Return True if ``valor`` is the number of an existing category."""
    return valor in _NOMBRES


def nombre_categoria(valor: int) -> str:
    """Return the name of the category numbered ``valor``, or "" if unknown."""
    return _NOMBRES.get(valor, "")


def categorias() -> dict[int, str]:
    """Return every category number mapped to its name, in ascending order."""
    return {int(categoria): nombre for categoria, nombre in sorted(_NOMBRES.items())}