"""
Menu match API router.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from backend.api.models import (
    BestVendorResponse,
    CatalogStatusResponse,
    RankResponse,
    VendorListResponse,
    VendorMatch,
    VendorMenuResponse,
)
from backend.api.security import require_api_key
from backend.core.config import settings

# Import menu match module
from menu_match import (
    LoadResult,
    RecordParseError,
    default_config,
    load_catalog,
    load_config,
    parse_requested_items,
    pick_best_vendor,
    rank_vendors,
)
from menu_match.report import format_console

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Menu Match"])

# Global state for menu match (loaded on first use or at startup).
# A reload builds a new catalog and swaps the reference; the catalog in
# use is never mutated.
_menu_match_state = {
    "result": None,
    "error": None,
    "initialized": False,
}


def load_menu_match(data_paths: Optional[list] = None, config_path: Optional[str] = None) -> LoadResult:
    """
    Build a fresh catalog from the configured files and make it current.

    If none of the files can be read and a catalog is already being served,
    that catalog stays current and the failed result is only returned.

    Raises:
        RecordParseError: If a catalog file has a bad vendor id or price.
            The current catalog is left in place.
        OSError, ValueError: If the config file is missing or invalid.
    """
    paths = data_paths if data_paths is not None else settings.DATA_PATHS
    config_path = config_path if config_path is not None else settings.CONFIG_PATH
    config = load_config(config_path) if config_path else default_config()

    result = load_catalog(paths, config)

    if not result.ok:
        logger.warning("No catalog files could be loaded from %s", paths)
        previous = _menu_match_state["result"]
        if previous is not None and previous.ok:
            logger.warning("Keeping the previously loaded catalog")
            return result

    _menu_match_state["result"] = result
    _menu_match_state["error"] = None
    _menu_match_state["initialized"] = True
    return result


def init_menu_match() -> bool:
    """Initialize menu match if not already done."""
    if _menu_match_state["initialized"]:
        return True

    try:
        load_menu_match()
        return True
    except RecordParseError as e:
        logger.error("Catalog load aborted: %s", e)
        _menu_match_state["error"] = f"Invalid catalog data: {e}"
        _menu_match_state["initialized"] = True
        return False
    except (OSError, ValueError) as e:
        logger.error("Menu match config could not be loaded: %s", e)
        _menu_match_state["error"] = f"Invalid menu match config: {e}"
        _menu_match_state["initialized"] = True
        return False


def reset_menu_match():
    """Forget the loaded catalog (next request loads again)."""
    _menu_match_state["result"] = None
    _menu_match_state["error"] = None
    _menu_match_state["initialized"] = False


def _require_catalog():
    init_menu_match()

    result = _menu_match_state.get("result")
    if result is None or not result.ok:
        detail = _menu_match_state.get("error") or "Catalog not loaded. Check MENU_MATCH_DATA_PATHS."
        raise HTTPException(status_code=503, detail=detail)
    return result.catalog


def _to_match(best) -> VendorMatch:
    return VendorMatch(vendor_id=best.vendor_id, total_price=str(best.total_price))


@router.get("/api/menu-match/status", response_model=CatalogStatusResponse)
def menu_match_status():
    """Get menu match catalog status."""
    init_menu_match()

    result = _menu_match_state.get("result")
    if result is None:
        return CatalogStatusResponse(loaded=False, error=_menu_match_state.get("error"))

    return CatalogStatusResponse(
        loaded=result.ok,
        vendor_count=len(result.catalog),
        item_count=result.catalog.item_count,
        loaded_sources=result.loaded_sources,
        missing_sources=result.missing_sources,
        stats=result.stats.as_dict(),
        error=_menu_match_state.get("error"),
    )


@router.get("/api/menu-match/best", response_model=BestVendorResponse)
def best_vendor(items: str = Query(..., description="Comma-separated item names")):
    """
    Cheapest vendor that offers every requested item.

    `match` is null when no vendor covers the request.
    """
    catalog = _require_catalog()

    best = pick_best_vendor(catalog, items)
    return BestVendorResponse(
        items=list(parse_requested_items(items)),
        match=_to_match(best) if best else None,
    )


@router.get("/api/menu-match/rank", response_model=RankResponse)
def rank(
    items: str = Query(..., description="Comma-separated item names"),
    limit: int = Query(10, ge=1, le=1000),
):
    """All vendors covering the request, cheapest first."""
    catalog = _require_catalog()

    matches = rank_vendors(catalog, items)[:limit]
    return RankResponse(
        items=list(parse_requested_items(items)),
        matches=[_to_match(m) for m in matches],
        count=len(matches),
    )


@router.get("/api/menu-match/report")
def report(items: str = Query(..., description="Comma-separated item names")):
    """Get formatted text report for a request."""
    catalog = _require_catalog()

    ranking = rank_vendors(catalog, items)
    content = format_console(catalog, items, ranking, show_all=True)
    return Response(content=content, media_type="text/plain")


@router.get("/api/menu-match/vendors", response_model=VendorListResponse)
def list_vendors():
    """Vendor ids in catalog order."""
    catalog = _require_catalog()
    return VendorListResponse(vendors=list(catalog.vendor_ids), count=len(catalog))


@router.get("/api/menu-match/vendors/{vendor_id}", response_model=VendorMenuResponse)
def get_vendor(vendor_id: int):
    """A vendor's menu with the cheapest known price per item."""
    catalog = _require_catalog()

    vendor = catalog.get_vendor(vendor_id)
    if vendor is None:
        raise HTTPException(status_code=404, detail=f"Vendor {vendor_id} not found")

    return VendorMenuResponse(
        vendor_id=vendor.vendor_id,
        position=vendor.position,
        menu={item: str(price) for item, price in vendor.menu.items()},
    )


@router.post("/api/menu-match/reload", dependencies=[Depends(require_api_key)])
def reload_menu_match():
    """Reload the catalog from the configured files."""
    try:
        result = load_menu_match()
    except RecordParseError as e:
        logger.warning("Catalog reload rejected: %s", e)
        raise HTTPException(status_code=422, detail=f"Invalid catalog data: {e}")
    except (OSError, ValueError) as e:
        logger.warning("Catalog reload rejected, bad config: %s", e)
        raise HTTPException(status_code=503, detail=f"Invalid menu match config: {e}")

    if not result.ok:
        missing = ", ".join(result.missing_sources) or "no data paths configured"
        raise HTTPException(status_code=503, detail=f"No catalog files could be loaded: {missing}")

    return menu_match_status()
