"""Tests for entity shapes."""

from constraintkit.entity import Entity, EntityRef


class TestEntity:
    def test_ref(self, product):
        ref = product.ref()
        assert ref.id == "prod-42"
        assert ref.is_loaded
        assert ref.get() is product


class TestEntityRef:
    def test_lazy_get(self, product_ref, product):
        assert product_ref.is_filled
        assert not product_ref.is_loaded
        assert product_ref.get() is product
        assert product_ref.is_loaded

    def test_get_without_loader(self):
        assert EntityRef(id="x").get() is None

    def test_equality_by_id(self, product):
        assert EntityRef(id="prod-42") == product.ref()
        assert EntityRef(id="prod-42") != EntityRef(id="other")
        assert hash(EntityRef(id="a")) == hash(EntityRef(id="a"))

    def test_empty_ref(self):
        ref = EntityRef.of(None)
        assert not ref.is_filled
        assert ref.get() is None
