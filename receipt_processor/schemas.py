from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple

# Receipt fields stay optional at decode time; presence is checked by
# validation.receipt so that a missing field yields a verdict, not a 422.
class Item(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: Optional[str] = Field(None, alias="shortDescription")
    price: Optional[str] = None

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: Optional[str] = None
    purchase_date: Optional[str] = Field(None, alias="purchaseDate")
    purchase_time: Optional[str] = Field(None, alias="purchaseTime")
    items: Optional[Tuple[Item, ...]] = None
    total: Optional[str] = None

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
