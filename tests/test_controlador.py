import pytest

from catalogo.categoria import Categoria
from catalogo.controlador import ProductoController
from catalogo.producto import ProductoDTO
from catalogo.sistema import Sistema


@pytest.fixture
def controlador():
    return ProductoController(Sistema())


def _dto(codigo="A1"):
    return ProductoDTO(codigo, 3, 9.99, "Heladera", "Grande", Categoria.ELECTRODOMESTICO)


def test_empty_system_has_no_products(controlador):
    assert controlador.obtener_productos() == []


def test_unknown_code_is_not_found(controlador):
    assert controlador.verificar_codigo("A1") is False


def test_added_product_is_found(controlador):
    controlador.agregar_producto(_dto())
    assert controlador.verificar_codigo("A1") is True
    assert controlador.verificar_codigo("B2") is False


def test_added_product_is_listed(controlador):
    dto = _dto()
    controlador.agregar_producto(dto)
    assert controlador.obtener_productos() == [dto]


def test_products_listed_in_insertion_order(controlador):
    for codigo in ["C", "A", "B"]:
        controlador.agregar_producto(_dto(codigo))
    assert [p.codigo for p in controlador.obtener_productos()] == ["C", "A", "B"]


def test_product_stored_in_system():
    sistema = Sistema()
    ProductoController(sistema).agregar_producto(_dto())
    assert [p.codigo for p in sistema.productos] == ["A1"]


def test_controllers_over_same_system_share_data():
    sistema = Sistema()
    ProductoController(sistema).agregar_producto(_dto())
    assert ProductoController(sistema).verificar_codigo("A1") is True


def test_default_uses_shared_system():
    assert ProductoController().sistema is Sistema.instancia()


def test_adding_none_raises(controlador):
    with pytest.raises(ValueError):
        controlador.agregar_producto(None)