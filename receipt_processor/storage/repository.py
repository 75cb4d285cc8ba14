# receipt_processor/storage/repository.py
import threading
import uuid
from typing import Dict, Optional

from ..schemas import Receipt

class ReceiptRepository:
    """In-memory id -> receipt store. Contents are lost on restart."""

    def __init__(self):
        self._rows: Dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def add(self, receipt: Receipt) -> str:
        receipt_id = str(uuid.uuid4())
        with self._lock:
            self._rows[receipt_id] = receipt
        return receipt_id

    def get(self, receipt_id: str) -> Optional[Receipt]:
        with self._lock:
            return self._rows.get(receipt_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
