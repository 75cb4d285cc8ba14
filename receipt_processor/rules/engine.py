# receipt_processor/rules/engine.py
from typing import Dict

from ..schemas import Receipt
from .ruleset import DEFAULT_RULES

class RulesEngine:
    """Sums the contributions of the fixed, ordered rule set."""

    def __init__(self):
        self.rules = DEFAULT_RULES

    def breakdown(self, receipt: Receipt) -> Dict[str, int]:
        return {rule.__name__: rule(receipt) for rule in self.rules}

    def calculate_points(self, receipt: Receipt) -> int:
        return sum(rule(receipt) for rule in self.rules)
