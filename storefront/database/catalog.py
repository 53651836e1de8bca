"""In-memory catalog database"""

import re
import uuid
import logging
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

from ..core.config import settings
from ..models.listing import (
    Category,
    ListingBase,
    ListingCreate,
    ListingType,
    ListingUpdate,
    Package,
    Rental,
    RetailItem,
)

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Invalid catalog change"""


CATEGORIES: list[Category] = [
    Category(id="cat-1", name="Professional", description="High-end professional walkie talkies"),
    Category(id="cat-2", name="Waterproof", description="Waterproof and weather-resistant models"),
    Category(id="cat-3", name="Budget", description="Affordable options for basic needs"),
    Category(id="cat-4", name="Consumer", description="Consumer-grade walkie talkies"),
    Category(id="cat-5", name="Headsets", description="Audio accessories and headsets"),
    Category(id="cat-6", name="Chargers", description="Charging solutions and accessories"),
    Category(id="cat-7", name="Batteries", description="Battery packs and power solutions"),
    Category(id="cat-8", name="Cases", description="Protective cases and carrying solutions"),
    Category(id="cat-9", name="Accessories", description="Various walkie talkie accessories"),
    Category(id="cat-10", name="Antennas", description="Antennas and signal boosters"),
    Category(id="cat-11", name="Small Events", description="Bundles for small gatherings"),
    Category(id="cat-12", name="Medium Events", description="Bundles for corporate and school events"),
    Category(id="cat-13", name="Large Events", description="Bundles for festivals and large sites"),
    Category(id="cat-14", name="Construction", description="Heavy-duty bundles for job sites"),
]

# Demo catalog
RENTALS: list[dict] = [
    {
        "id": "rental-1",
        "name": "Motorola XPR 7550e",
        "description": "Professional digital two-way radio with GPS and Bluetooth connectivity",
        "daily_rate": Decimal("25.00"),
        "category_id": "cat-1",
        "current_inventory": 50,
        "specs": {"frequency": "VHF/UHF", "power": "5W", "battery": "Li-Ion"},
        "search_tags": "motorola, professional, bluetooth",
    },
    {
        "id": "rental-2",
        "name": "Kenwood NX-340",
        "description": "Compact UHF digital transceiver with excellent audio quality",
        "daily_rate": Decimal("18.00"),
        "category_id": "cat-1",
        "current_inventory": 30,
        "specs": {"frequency": "UHF", "power": "5W", "battery": "Ni-MH"},
        "availability_date": date(2025, 1, 15),
        "search_tags": "kenwood, uhf, compact",
    },
    {
        "id": "rental-3",
        "name": "Hytera PD785",
        "description": "Advanced digital radio with color display and GPS navigation",
        "daily_rate": Decimal("22.00"),
        "category_id": "cat-1",
        "current_inventory": 25,
        "specs": {"frequency": "VHF/UHF", "power": "4W", "battery": "Li-Ion"},
        "search_tags": "hytera, gps, advanced",
    },
    {
        "id": "rental-4",
        "name": "Icom IC-F3400D",
        "description": "IDAS digital transceiver with waterproof and dustproof design",
        "daily_rate": Decimal("20.00"),
        "category_id": "cat-2",
        "current_inventory": 15,
        "specs": {"frequency": "VHF/UHF", "power": "5W", "battery": "Li-Ion"},
        "availability_date": date(2025, 1, 20),
        "search_tags": "icom, waterproof, rugged",
    },
    {
        "id": "rental-5",
        "name": "Baofeng UV-5R",
        "description": "Affordable dual-band handheld transceiver for basic communications",
        "daily_rate": Decimal("8.00"),
        "category_id": "cat-3",
        "current_inventory": 100,
        "specs": {"frequency": "VHF/UHF", "power": "5W", "battery": "Li-Ion"},
        "search_tags": "baofeng, budget, dual-band",
    },
    {
        "id": "rental-6",
        "name": "Midland GXT1000VP4",
        "description": "Long-range GMRS radio with weather alerts and privacy codes",
        "daily_rate": Decimal("15.00"),
        "category_id": "cat-4",
        "current_inventory": 40,
        "specs": {"frequency": "GMRS", "power": "5W", "battery": "Ni-MH"},
        "search_tags": "midland, gmrs, long-range",
    },
]

RETAIL_ITEMS: list[dict] = [
    {
        "id": "retail-1",
        "name": "Professional Over-Ear Headset",
        "description": "Noise-canceling headset with boom microphone for clear communication",
        "unit_cost": Decimal("89.99"),
        "category_id": "cat-5",
        "current_inventory": 25,
        "specs": {"type": "Over-ear", "noiseCanceling": True, "microphone": "Boom"},
        "search_tags": "headset, professional, audio",
    },
    {
        "id": "retail-2",
        "name": "Surveillance Earpiece Kit",
        "description": "Discreet earpiece with clear acoustic tube for security personnel",
        "unit_cost": Decimal("34.99"),
        "category_id": "cat-5",
        "current_inventory": 15,
        "specs": {"type": "Earpiece", "style": "Acoustic tube", "color": "Black"},
        "search_tags": "earpiece, surveillance, discreet",
    },
    {
        "id": "retail-3",
        "name": "Multi-Unit Desktop Charger",
        "description": "6-bay desktop charger compatible with Motorola XPR series",
        "unit_cost": Decimal("299.99"),
        "category_id": "cat-6",
        "current_inventory": 8,
        "specs": {"bays": 6, "compatibility": "Motorola XPR", "voltage": "12V"},
        "search_tags": "charger, desktop, multi-unit",
    },
    {
        "id": "retail-4",
        "name": "High-Capacity Battery Pack",
        "description": "Extended life Li-Ion battery for prolonged use in demanding environments",
        "unit_cost": Decimal("79.99"),
        "category_id": "cat-7",
        "current_inventory": 30,
        "specs": {"capacity": "3000mAh", "chemistry": "Li-Ion", "voltage": "7.4V"},
        "search_tags": "battery, li-ion, high-capacity",
    },
    {
        "id": "retail-5",
        "name": "Waterproof Protective Case",
        "description": "Hard-shell case with foam interior for safe transport of 6 walkie talkies",
        "unit_cost": Decimal("149.99"),
        "category_id": "cat-8",
        "current_inventory": 12,
        "specs": {"capacity": 6, "material": "ABS plastic", "waterproof": "IP67"},
        "search_tags": "case, waterproof, transport",
    },
    {
        "id": "retail-6",
        "name": "Belt Clip and Holster Combo",
        "description": "Heavy-duty belt clip with quick-release holster for professional use",
        "unit_cost": Decimal("24.99"),
        "category_id": "cat-9",
        "current_inventory": 45,
        "specs": {"material": "Nylon", "attachment": "Belt clip", "quickRelease": True},
        "search_tags": "holster, belt clip, accessory",
    },
    {
        "id": "retail-7",
        "name": "External Antenna Kit",
        "description": "High-gain antenna for extended range in outdoor environments",
        "unit_cost": Decimal("59.99"),
        "category_id": "cat-10",
        "current_inventory": 20,
        "specs": {"gain": "5dBi", "frequency": "VHF/UHF", "connector": "SMA"},
        "search_tags": "antenna, high-gain, outdoor",
    },
    {
        "id": "retail-8",
        "name": "Programming Cable",
        "description": "USB programming cable for walkie talkie configuration and updates",
        "unit_cost": Decimal("29.99"),
        "category_id": "cat-9",
        "current_inventory": 18,
        "specs": {"interface": "USB", "compatibility": "Multiple brands", "length": "6ft"},
        "search_tags": "programming, cable, usb",
    },
]

PACKAGES: list[dict] = [
    {
        "id": "package-1",
        "name": "Small Event Package",
        "description": "Perfect for small gatherings, family events, or small business operations",
        "daily_rate": Decimal("75.00"),
        "category_id": "cat-11",
        "items": [
            {"name": "Motorola XPR 7550e", "quantity": 4},
            {"name": "Multi-unit Charger", "quantity": 1},
            {"name": "Earpieces", "quantity": 4},
        ],
        "search_tags": "small event, starter, family",
    },
    {
        "id": "package-2",
        "name": "Medium Event Package",
        "description": "Ideal for corporate events, medium-sized construction sites, or school activities",
        "daily_rate": Decimal("150.00"),
        "category_id": "cat-12",
        "items": [
            {"name": "Kenwood NX-340", "quantity": 8},
            {"name": "Multi-unit Charger", "quantity": 2},
            {"name": "Headsets", "quantity": 8},
            {"name": "Carrying Cases", "quantity": 2},
        ],
        "search_tags": "medium event, corporate, school",
    },
    {
        "id": "package-3",
        "name": "Large Event Package",
        "description": "Complete solution for large events, festivals, or major construction projects",
        "daily_rate": Decimal("300.00"),
        "category_id": "cat-13",
        "items": [
            {"name": "Hytera PD785", "quantity": 16},
            {"name": "Multi-unit Charger", "quantity": 4},
            {"name": "Professional Headsets", "quantity": 16},
            {"name": "Repeater System", "quantity": 1},
            {"name": "Carrying Cases", "quantity": 4},
        ],
        "search_tags": "large event, festival, construction",
    },
    {
        "id": "package-4",
        "name": "Construction Pro Package",
        "description": "Heavy-duty package designed for construction sites and industrial use",
        "daily_rate": Decimal("200.00"),
        "category_id": "cat-14",
        "items": [
            {"name": "Icom IC-F3400D (Waterproof)", "quantity": 10},
            {"name": "Heavy-duty Headsets", "quantity": 10},
            {"name": "Multi-unit Charger", "quantity": 2},
            {"name": "Protective Cases", "quantity": 10},
        ],
        "search_tags": "construction, waterproof, pro",
    },
]

MODELS: dict[ListingType, type[ListingBase]] = {
    ListingType.RENTAL: Rental,
    ListingType.RETAIL: RetailItem,
    ListingType.PACKAGE: Package,
}

ID_PREFIXES: dict[ListingType, str] = {
    ListingType.RENTAL: "rental",
    ListingType.RETAIL: "retail",
    ListingType.PACKAGE: "package",
}

# Fields an update may explicitly clear
NULLABLE_FIELDS = {"description", "image", "specs", "availability_date"}


def slugify(name: str) -> str:
    """Lowercase, hyphen-separated slug"""
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


class CatalogDatabase:
    """In-memory catalog of rentals, retail items and packages"""

    def __init__(self, seed: bool = True):
        self.categories: dict[str, Category] = {}
        self.listings: dict[ListingType, dict[str, ListingBase]] = {}
        self.reset(seed=seed)

    def reset(self, seed: bool = True) -> None:
        """Drop every listing, optionally reloading the demo catalog"""
        self.categories = {c.id: c for c in CATEGORIES}
        self.listings = {t: {} for t in ListingType}
        if seed:
            self._seed()

    def _seed(self) -> None:
        # Staggered timestamps keep the demo catalog in its listed order
        seeded_at = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        for listing_type, rows in (
            (ListingType.RENTAL, RENTALS),
            (ListingType.RETAIL, RETAIL_ITEMS),
            (ListingType.PACKAGE, PACKAGES),
        ):
            for index, row in enumerate(rows):
                data = {
                    **row,
                    "slug": slugify(row["name"]),
                    "category": self.categories[row["category_id"]],
                    "created_at": seeded_at - timedelta(minutes=index),
                }
                listing = MODELS[listing_type].model_validate(data)
                self.listings[listing_type][listing.id] = listing

    def list_categories(self) -> list[Category]:
        """Get all categories"""
        return sorted(self.categories.values(), key=lambda c: c.name)

    def get_category(self, category_id: str) -> Optional[Category]:
        return self.categories.get(category_id)

    def list_listings(
        self,
        listing_type: ListingType,
        available_only: bool = False,
        category: Optional[str] = None,
    ) -> list[ListingBase]:
        """
        List listings of one type, newest first.

        Args:
            listing_type: Which catalog to list
            available_only: Hide listings marked unavailable
            category: Filter by category id or name (case-insensitive)
        """
        results = list(self.listings[listing_type].values())

        if available_only:
            results = [item for item in results if item.available]

        if category:
            category_lower = category.lower()
            results = [
                item for item in results
                if item.category_id == category
                or (item.category_name or "").lower() == category_lower
            ]

        results.sort(key=lambda item: item.created_at, reverse=True)
        return results

    def get_listing(self, listing_type: ListingType, listing_id: str) -> Optional[ListingBase]:
        """Get a listing by ID"""
        return self.listings[listing_type].get(listing_id)

    def create_listing(self, listing_type: ListingType, data: ListingCreate) -> ListingBase:
        """
        Create a listing.

        Raises:
            CatalogError: Unknown category
        """
        category = self._require_category(data.category_id)
        fields = data.model_dump()
        fields["slug"] = data.slug or slugify(data.name)
        fields["id"] = f"{ID_PREFIXES[listing_type]}-{uuid.uuid4().hex[:8]}"
        fields["category"] = category
        fields["created_at"] = datetime.now(timezone.utc)

        listing = MODELS[listing_type].model_validate(fields)
        self.listings[listing_type][listing.id] = listing
        logger.info(f"Created {listing_type.value} listing {listing.id} ({listing.name})")
        return listing

    def update_listing(
        self,
        listing_type: ListingType,
        listing_id: str,
        data: ListingUpdate,
    ) -> Optional[ListingBase]:
        """
        Update only the fields present in the request.

        Returns:
            The updated listing, or None if it does not exist

        Raises:
            CatalogError: Unknown category
        """
        listing = self.get_listing(listing_type, listing_id)
        if not listing:
            return None

        changes = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        if "category_id" in changes:
            changes["category"] = self._require_category(changes["category_id"])

        updated = type(listing).model_validate({**listing.model_dump(), **changes})
        self.listings[listing_type][listing_id] = updated
        logger.info(f"Updated {listing_type.value} listing {listing_id}: {sorted(changes)}")
        return updated

    def delete_listing(self, listing_type: ListingType, listing_id: str) -> bool:
        """Delete a listing"""
        if listing_id in self.listings[listing_type]:
            del self.listings[listing_type][listing_id]
            logger.info(f"Deleted {listing_type.value} listing {listing_id}")
            return True
        return False

    def _require_category(self, category_id: str) -> Category:
        category = self.get_category(category_id)
        if not category:
            raise CatalogError(f"Unknown category: {category_id}")
        return category


# Singleton instance
catalog_db = CatalogDatabase(seed=settings.seed_demo_catalog)
