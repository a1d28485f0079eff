"""Overall extraction confidence."""

from dataclasses import astuple

from docminder.domain.document import DateDetails, ProductDetails, VendorDetails


def calculate_confidence(vendor: VendorDetails, product: ProductDetails, dates: DateDetails) -> float:
    """Return the share of filled fields across vendor, product and date details.

    Every field weighs the same; 0 is returned when there are no fields.
    """
    values = astuple(vendor) + astuple(product) + astuple(dates)
    if not values:
        return 0.0
    filled = sum(1 for value in values if value is not None)
    return filled / len(values)
