"""Test fixtures: a small vegetable/dairy catalog and a synonym index."""

import pytest

from voiceorder.models import Product
from voiceorder.synonyms import build_synonym_index


@pytest.fixture()
def index():
    return build_synonym_index()


@pytest.fixture()
def catalog() -> list[Product]:
    return [
        Product(id="p1", name="potato", price=20.0, unit="kg", supplier_id="s1", supplier_name="Ramesh Traders"),
        Product(id="p2", name="onion", price=30.0, unit="kg", supplier_id="s1", supplier_name="Ramesh Traders"),
        Product(id="p3", name="tomato", price=25.0, unit="kg", supplier_id="s2", supplier_name="Gupta Wholesale"),
        Product(id="p4", name="paneer", price=320.0, unit="kg", supplier_id="s2", supplier_name="Gupta Wholesale"),
        Product(id="p5", name="milk", price=56.0, unit="litre", supplier_id="s3", supplier_name="Anand Dairy"),
        Product(id="p6", name="milk", price=52.0, unit="litre", supplier_id="s1", supplier_name="Ramesh Traders"),
        Product(id="p7", name="capsicum", price=60.0, unit="kg", supplier_id="s2", supplier_name="Gupta Wholesale"),
        # Supplier document missing upstream
        Product(id="p8", name="ghee", price=600.0, unit="kg", supplier_id="s9", supplier_name=None),
    ]
