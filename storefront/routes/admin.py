"""Admin inventory routes (employee or admin only)"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from identity import VerificationResult

from ..models.listing import (
    Category,
    DeleteResponse,
    ListingType,
    Package,
    PackageCreate,
    PackageUpdate,
    Rental,
    RentalCreate,
    RentalUpdate,
    RetailItem,
    RetailItemCreate,
    RetailItemUpdate,
)
from ..database.catalog import catalog_db, CatalogError
from ..security.session_middleware import require_staff

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin"], dependencies=[Depends(require_staff)])


def register_listing_routes(listing_type: ListingType, model, create_model, update_model) -> None:
    """Register list/create/update/delete routes for one listing type"""
    path = f"/{listing_type.value}"

    @router.get(path, response_model=list[model], name=f"admin_list_{listing_type.value}")
    async def list_listings():
        return catalog_db.list_listings(listing_type)

    @router.post(path, response_model=model, status_code=201, name=f"admin_create_{listing_type.value}")
    async def create_listing(
        request: create_model,
        session: VerificationResult = Depends(require_staff),
    ):
        try:
            listing = catalog_db.create_listing(listing_type, request)
        except CatalogError as e:
            raise HTTPException(status_code=400, detail=str(e))

        logger.info(f"{session.claims.email} created {listing_type.value} {listing.id}")
        return listing

    @router.put(f"{path}/{{listing_id}}", response_model=model, name=f"admin_update_{listing_type.value}")
    async def update_listing(
        listing_id: str,
        request: update_model,
        session: VerificationResult = Depends(require_staff),
    ):
        try:
            listing = catalog_db.update_listing(listing_type, listing_id, request)
        except CatalogError as e:
            raise HTTPException(status_code=400, detail=str(e))

        if not listing:
            raise HTTPException(status_code=404, detail="Listing not found")

        logger.info(f"{session.claims.email} updated {listing_type.value} {listing_id}")
        return listing

    @router.delete(f"{path}/{{listing_id}}", response_model=DeleteResponse, name=f"admin_delete_{listing_type.value}")
    async def delete_listing(
        listing_id: str,
        session: VerificationResult = Depends(require_staff),
    ):
        if not catalog_db.delete_listing(listing_type, listing_id):
            raise HTTPException(status_code=404, detail="Listing not found")

        logger.info(f"{session.claims.email} deleted {listing_type.value} {listing_id}")
        return DeleteResponse(success=True)


register_listing_routes(ListingType.RENTAL, Rental, RentalCreate, RentalUpdate)
register_listing_routes(ListingType.RETAIL, RetailItem, RetailItemCreate, RetailItemUpdate)
register_listing_routes(ListingType.PACKAGE, Package, PackageCreate, PackageUpdate)


@router.get("/categories", response_model=list[Category])
async def list_categories():
    """Categories for the admin listing forms"""
    return catalog_db.list_categories()
