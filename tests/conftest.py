# tests/conftest.py
import pytest

from menusearch.logger import logger


# --- Catalogues de test ---

@pytest.fixture
def restaurants():
    """Petit catalogue de restaurants, au format renvoyé par l'API publique."""
    return [
        {"id": 1, "restaurant_name": "Burger Barn", "cuisine": "American",
         "description": None, "address": "12 Galle Road"},
        {"id": 2, "restaurant_name": "Koththu King", "cuisine": "Sri Lankan",
         "description": "Street food classics", "address": "5 Temple Lane"},
        {"id": 3, "restaurant_name": "Pizza Palace", "cuisine": "Italian",
         "description": "Wood fired", "address": None},
    ]


@pytest.fixture
def foods():
    """Plats avec leur restaurant imbriqué (parfois absent)."""
    return [
        {"id": 10, "name": "Chicken Biryani", "description": "Fragrant rice",
         "category": "Rice", "restaurants": {"restaurant_name": "Spice Garden"}},
        {"id": 11, "name": "Cheese Kottu", "description": None,
         "category": "Kottu", "restaurants": None},
        {"id": 12, "name": "Margherita", "description": "Tomato and mozzarella",
         "category": "Pizza", "restaurants": {"restaurant_name": "Pizza Palace"}},
    ]


def by_name(item):
    """Extracteur de champs minimal."""
    return [item["name"]]


@pytest.fixture
def name_extractor():
    return by_name


# --- Capture des logs Loguru ---

@pytest.fixture
def log_messages():
    """Capture les messages Loguru (niveau DEBUG et plus) pendant le test."""
    messages = []
    logger.enable("menusearch")
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("menusearch")
