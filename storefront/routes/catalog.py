"""Public catalog routes"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from ..models.listing import Category, ListingType, Package, Rental, RetailItem
from ..database.catalog import catalog_db

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/rentals", response_model=list[Rental])
async def list_rentals(
    category: Optional[str] = Query(None, description="Filter by category id or name"),
):
    """List available rentals, newest first"""
    return catalog_db.list_listings(ListingType.RENTAL, available_only=True, category=category)


@router.get("/store", response_model=list[RetailItem])
async def list_store_items(
    category: Optional[str] = Query(None, description="Filter by category id or name"),
):
    """List available retail items, newest first"""
    return catalog_db.list_listings(ListingType.RETAIL, available_only=True, category=category)


@router.get("/packages", response_model=list[Package])
async def list_packages(
    category: Optional[str] = Query(None, description="Filter by category id or name"),
):
    """List available packages, newest first"""
    return catalog_db.list_listings(ListingType.PACKAGE, available_only=True, category=category)


@router.get("/categories", response_model=list[Category])
async def list_categories():
    """List all listing categories"""
    return catalog_db.list_categories()


@router.get("/listings/{listing_type}/{listing_id}")
async def get_listing(listing_type: ListingType, listing_id: str):
    """Get a single available listing"""
    listing = catalog_db.get_listing(listing_type, listing_id)
    if not listing or not listing.available:
        raise HTTPException(status_code=404, detail="Listing not found")
    return listing
