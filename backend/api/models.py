"""
Pydantic request/response models for the API.

Prices are strings so Decimal values survive JSON unchanged.
"""
from pydantic import BaseModel
from typing import Dict, List, Optional


# ============== Matching ==============

class VendorMatch(BaseModel):
    vendor_id: int
    total_price: str


class BestVendorResponse(BaseModel):
    items: List[str]
    match: Optional[VendorMatch] = None


class RankResponse(BaseModel):
    items: List[str]
    matches: List[VendorMatch]
    count: int


# ============== Catalog ==============

class VendorMenuResponse(BaseModel):
    vendor_id: int
    position: int
    menu: Dict[str, str]


class VendorListResponse(BaseModel):
    vendors: List[int]
    count: int


class CatalogStatusResponse(BaseModel):
    loaded: bool
    vendor_count: int = 0
    item_count: int = 0
    loaded_sources: List[str] = []
    missing_sources: List[str] = []
    stats: Dict[str, int] = {}
    error: Optional[str] = None
