import sqlite3

from coursekit.product import (
    Product,
    ProductRepository,
    ProductUseCase,
    main,
    new_use_case,
)


def test_repository_returns_named_product():
    repository = ProductRepository(sqlite3.connect(":memory:"))
    assert repository.get_product(7) == Product(id=7, name="Product Name")


def test_use_case_delegates_to_repository():
    class FakeRepository:
        def __init__(self):
            self.calls = []

        def get_product(self, product_id):
            self.calls.append(product_id)
            return Product(product_id, "Fake")

    repository = FakeRepository()
    use_case = ProductUseCase(repository)
    assert use_case.get_product(3) == Product(3, "Fake")
    assert repository.calls == [3]


def test_new_use_case_wires_repository():
    use_case = new_use_case(sqlite3.connect(":memory:"))
    assert isinstance(use_case.repository, ProductRepository)
    assert use_case.get_product(1) == Product(1, "Product Name")


def test_main_prints_product_name(tmp_path, capsys):
    assert main([str(tmp_path / "test.db")]) == 0
    assert capsys.readouterr().out.strip() == "Product Name"