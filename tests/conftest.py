"""Pytest configuration and fixtures for constraint tests."""

import enum
import logging

import pytest
from dotenv import load_dotenv

from constraintkit.entity import Entity, EntityRef
from constraintkit.settings import settings

# Load environment variables
load_dotenv()


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Status(str, enum.Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class Product(Entity):
    name: str = ""


@pytest.fixture
def color():
    return Color


@pytest.fixture
def status():
    return Status


@pytest.fixture
def product():
    """A stored entity."""
    return Product(id="prod-42", name="Kettle")


@pytest.fixture
def unsaved_product():
    """An entity which has not been stored yet."""
    return Product(name="Teapot")


@pytest.fixture
def product_ref(product):
    """A lazy reference which has not been loaded yet."""
    return EntityRef(id=product.id, loader=lambda _id: product)


@pytest.fixture
def berlin(monkeypatch):
    """Pin the conversion zone for instants."""
    monkeypatch.setattr(settings, "TIME_ZONE", "Europe/Berlin")
    return "Europe/Berlin"


@pytest.fixture
def debug_log(caplog):
    """Capture debug output of constraintkit loggers."""
    caplog.set_level(logging.DEBUG, logger="constraintkit")
    return caplog
