import pytest
from fastapi.testclient import TestClient

from receipt_processor.main import create_app
from receipt_processor.schemas import Receipt

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}

@pytest.fixture
def target_payload():
    return {**TARGET_RECEIPT, "items": [dict(i) for i in TARGET_RECEIPT["items"]]}

@pytest.fixture
def corner_market_payload():
    return {**CORNER_MARKET_RECEIPT, "items": [dict(i) for i in CORNER_MARKET_RECEIPT["items"]]}

@pytest.fixture
def target_receipt(target_payload):
    return Receipt.model_validate(target_payload)

@pytest.fixture
def corner_market_receipt(corner_market_payload):
    return Receipt.model_validate(corner_market_payload)

@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c
