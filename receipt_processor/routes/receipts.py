# receipt_processor/routes/receipts.py
from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_repository, get_rules_engine
from ..rules.engine import RulesEngine
from ..schemas import Receipt, ProcessResponse, PointsResponse
from ..storage.repository import ReceiptRepository
from ..utils.logging import logger
from ..validation.receipt import validate_receipt

router = APIRouter(prefix="/receipts", tags=["receipts"])

INVALID_RECEIPT = "The receipt is invalid."
RECEIPT_NOT_FOUND = "No receipt found for that ID."

@router.post("/process", response_model=ProcessResponse)
def process_receipt(receipt: Receipt, repo: ReceiptRepository = Depends(get_repository)):
    verdict = validate_receipt(receipt)
    if not verdict.is_valid:
        logger.info("Rejected receipt (%s): %s", verdict.kind.value, verdict.reason)
        raise HTTPException(status_code=400, detail=f"{INVALID_RECEIPT} {verdict.reason}")

    receipt_id = repo.add(receipt)
    logger.info("Stored receipt %s from retailer %r", receipt_id, receipt.retailer)
    return ProcessResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str,
               repo: ReceiptRepository = Depends(get_repository),
               engine: RulesEngine = Depends(get_rules_engine)):
    receipt = repo.get(receipt_id)
    if receipt is None:
        raise HTTPException(status_code=404, detail=RECEIPT_NOT_FOUND)

    logger.debug("Rule breakdown for %s: %s", receipt_id, engine.breakdown(receipt))
    points = engine.calculate_points(receipt)
    logger.info("Receipt %s scored %s points", receipt_id, points)
    return PointsResponse(points=points)
