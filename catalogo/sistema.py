"""Shared in-memory store of the application's data."""

from __future__ import annotations

from typing import ClassVar

from catalogo.producto import Producto


class Sistema:
    """Holds every product; one shared instance serves the whole application."""

    _instancia: ClassVar[Sistema | None] = None

    def __init__(self) -> None:
        self.productos: list[Producto] = []

    @classmethod
    def instancia(cls) -> Sistema:
        """Return the shared instance, creating it on first use."""
        if cls._instancia is None:
            cls._instancia = cls()
        return cls._instancia