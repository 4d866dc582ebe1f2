"""Display formatting shared by the presentation consumers."""

from immo_catalog.models import Property, PropertyCategory, TransactionKind

CATEGORY_LABELS = {
    PropertyCategory.VILLA: "Villa",
    PropertyCategory.APARTMENT: "Apartment",
    PropertyCategory.LAND: "Land",
    PropertyCategory.OFFICE: "Office",
}

TRANSACTION_LABELS = {
    TransactionKind.SALE: "For sale",
    TransactionKind.RENTAL: "For rent",
}


def format_fcfa(amount: float) -> str:
    """Format an amount in CFA francs with space thousand separators."""
    return f"{round(amount):,} FCFA".replace(",", " ")


def format_price(prop: Property) -> str:
    """Listing price, per month for rentals."""
    price = format_fcfa(prop.price)
    return f"{price} / month" if prop.transaction == TransactionKind.RENTAL else price


def format_area(area_sqm: float) -> str:
    return f"{area_sqm:g} m²"


def build_title(
    category: PropertyCategory,
    transaction: TransactionKind,
    rooms: int,
    area_sqm: float,
    neighborhood_name: str,
) -> str:
    """Headline such as ``"Villa for sale - 4 bd - Almadies"``."""
    size = f"{rooms} bd" if rooms > 0 else format_area(area_sqm)
    label = TRANSACTION_LABELS[transaction].lower()
    return f"{CATEGORY_LABELS[category]} {label} - {size} - {neighborhood_name}"
