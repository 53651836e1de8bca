"""Catalog listing models"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from cart_engine import CatalogEntry, ItemKind


class ListingType(str, Enum):
    RENTAL = "rentals"
    RETAIL = "retail"
    PACKAGE = "packages"


class Category(BaseModel):
    """Listing category"""
    id: str
    name: str
    description: Optional[str] = None


class ListingBase(BaseModel):
    """Fields shared by every listing"""
    id: str
    slug: str
    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    category_id: str
    category: Optional[Category] = None
    available: bool = True
    search_tags: str = ""
    created_at: datetime

    @property
    def category_name(self) -> Optional[str]:
        return self.category.name if self.category else None


class Rental(ListingBase):
    """Radio available for daily rental"""
    daily_rate: Decimal = Field(ge=0)
    current_inventory: int = Field(default=0, ge=0)
    specs: Optional[dict[str, Any]] = None
    availability_date: Optional[date] = None

    def to_catalog_entry(self) -> CatalogEntry:
        return CatalogEntry(
            id=self.id,
            name=self.name,
            price=self.daily_rate,
            image=self.image,
            kind=ItemKind.TIMED_RENTAL,
            category=self.category_name,
        )


class RetailItem(ListingBase):
    """Accessory sold outright"""
    unit_cost: Decimal = Field(ge=0)
    current_inventory: int = Field(default=0, ge=0)
    specs: Optional[dict[str, Any]] = None

    def to_catalog_entry(self) -> CatalogEntry:
        return CatalogEntry(
            id=self.id,
            name=self.name,
            price=self.unit_cost,
            image=self.image,
            kind=ItemKind.FLAT_PURCHASE,
            category=self.category_name,
        )


class PackageContent(BaseModel):
    """One line of a package bundle"""
    name: str
    quantity: int = Field(ge=1)


class Package(ListingBase):
    """Bundle of radios and accessories rented per day"""
    daily_rate: Decimal = Field(ge=0)
    items: list[PackageContent] = []

    def to_catalog_entry(self) -> CatalogEntry:
        return CatalogEntry(
            id=self.id,
            name=self.name,
            price=self.daily_rate,
            image=self.image,
            kind=ItemKind.TIMED_RENTAL,
            category=self.category_name,
        )


class ListingCreate(BaseModel):
    """Fields shared by admin create requests"""
    name: str = Field(min_length=1)
    slug: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    category_id: str = Field(min_length=1)
    available: bool = True
    search_tags: str = ""


class RentalCreate(ListingCreate):
    daily_rate: Decimal = Field(gt=0)
    current_inventory: int = Field(default=1, ge=0)
    specs: Optional[dict[str, Any]] = None
    availability_date: Optional[date] = None


class RetailItemCreate(ListingCreate):
    unit_cost: Decimal = Field(gt=0)
    current_inventory: int = Field(default=1, ge=0)
    specs: Optional[dict[str, Any]] = None


class PackageCreate(ListingCreate):
    daily_rate: Decimal = Field(gt=0)
    items: list[PackageContent] = []


class ListingUpdate(BaseModel):
    """Fields shared by admin update requests; only fields sent are changed"""
    name: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    category_id: Optional[str] = None
    available: Optional[bool] = None
    search_tags: Optional[str] = None


class RentalUpdate(ListingUpdate):
    daily_rate: Optional[Decimal] = Field(default=None, gt=0)
    current_inventory: Optional[int] = Field(default=None, ge=0)
    specs: Optional[dict[str, Any]] = None
    availability_date: Optional[date] = None


class RetailItemUpdate(ListingUpdate):
    unit_cost: Optional[Decimal] = Field(default=None, gt=0)
    current_inventory: Optional[int] = Field(default=None, ge=0)
    specs: Optional[dict[str, Any]] = None


class PackageUpdate(ListingUpdate):
    daily_rate: Optional[Decimal] = Field(default=None, gt=0)
    items: Optional[list[PackageContent]] = None


class DeleteResponse(BaseModel):
    success: bool = True
