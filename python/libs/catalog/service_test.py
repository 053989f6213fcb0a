import pytest

from catalog.models import Product
from catalog.service import (
    CatalogError,
    Found,
    Missing,
    ProductNotFoundError,
    ProductService,
)
from catalog.store import ProductStore


@pytest.fixture
def service():
    return ProductService(ProductStore())


def test_list_all_delegates_to_store(service):
    names = {p.name for p in service.list_all()}
    assert names == {"Sample Product A", "Sample Product B"}


def test_lookup_found(service):
    result = service.lookup(1)
    assert isinstance(result, Found)
    assert result.product.name == "Sample Product A"


@pytest.mark.parametrize("product_id", [None, 0, -1, 12345])
def test_lookup_missing(service, product_id):
    assert service.lookup(product_id) == Missing(product_id)


def test_get_or_fail_returns_product(service):
    product = service.get_or_fail(2)
    assert product.id == 2
    assert product.price == 29.9


def test_get_or_fail_raises_not_found(service):
    with pytest.raises(ProductNotFoundError) as excinfo:
        service.get_or_fail(404)
    assert excinfo.value.product_id == 404
    assert isinstance(excinfo.value, CatalogError)


def test_get_or_fail_null_id(service):
    with pytest.raises(ProductNotFoundError):
        service.get_or_fail(None)


def test_create_assigns_id_without_validation(service):
    created = service.create(Product(name="", price=-1.0))
    assert created.id == 3
    assert service.get_or_fail(3).name == ""
    assert service.get_or_fail(3).price == -1.0


def test_create_with_existing_id_overwrites(service):
    service.create(Product(id=1, name="Replaced", price=1.0))
    assert service.get_or_fail(1).name == "Replaced"
    assert len(service.list_all()) == 2
