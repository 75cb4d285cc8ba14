from fastapi import Request
from .rules.engine import RulesEngine
from .storage.repository import ReceiptRepository

# Both are built once in main.create_app and hung off app.state.
def get_repository(request: Request) -> ReceiptRepository:
    return request.app.state.repository

def get_rules_engine(request: Request) -> RulesEngine:
    return request.app.state.rules_engine
