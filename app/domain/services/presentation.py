"""
Dashboard view-model built from a ClassificationResult.
Formatting only: no filtering or ordering happens here.
"""
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from app.domain.models.dashboard import (
    BucketOut,
    DashboardOut,
    DistributionOut,
    DistributionSliceOut,
    ProductCardOut,
)
from app.domain.models.performance import ClassificationResult, ProductPerformanceRecord
from app.domain.services.constants import (
    BUCKET_EMPTY_MESSAGES,
    BUCKET_TITLES,
    CURRENCY_SYMBOL,
    DISTRIBUTION_COLORS,
    KIND_NON_SALEABLE,
    KIND_RATED,
    KIND_SALEABLE,
    NO_ANALYTICS_MESSAGE,
    NO_DISTRIBUTION_MESSAGE,
    NON_SALEABLE_LABEL,
    SALEABLE_LABEL,
    STATE_EMPTY,
    STATE_READY,
)


def format_price(price: Optional[float]) -> str:
    """Peso amount with thousands separators and two decimals, e.g. ₱1,234.50."""
    return f"{CURRENCY_SYMBOL}{float(price or 0):,.2f}"


def format_rating(rating: Optional[float]) -> Optional[float]:
    """One decimal with halves rounded up (4.25 -> 4.3). Unrated or zero-rated gives None."""
    if not rating:
        return None
    return float(Decimal(str(rating)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def to_card(record: ProductPerformanceRecord) -> ProductCardOut:
    return ProductCardOut(
        id=record.id,
        name=record.name,
        units_sold=record.units_sold,
        stock=record.stock,
        in_stock=record.stock > 0,
        rating=format_rating(record.average_rating),
        price=format_price(record.price),
    )


def build_bucket(kind: str, records: Iterable[ProductPerformanceRecord]) -> BucketOut:
    items = [to_card(r) for r in records]
    return BucketOut(
        kind=kind,
        title=BUCKET_TITLES[kind],
        items=items,
        count=len(items),
        empty_message=None if items else BUCKET_EMPTY_MESSAGES[kind],
    )


def build_distribution(result: ClassificationResult) -> DistributionOut:
    values = (result.saleable_count, result.non_saleable_count)
    slices = [
        DistributionSliceOut(name=name, value=value, color=color)
        for name, value, color in zip((SALEABLE_LABEL, NON_SALEABLE_LABEL), values, DISTRIBUTION_COLORS)
    ]
    has_data = any(v > 0 for v in values)
    return DistributionOut(
        slices=slices,
        has_data=has_data,
        empty_message=None if has_data else NO_DISTRIBUTION_MESSAGE,
    )


def build_dashboard(result: ClassificationResult, generated_at: datetime) -> DashboardOut:
    empty = result.is_empty
    return DashboardOut(
        state=STATE_EMPTY if empty else STATE_READY,
        message=NO_ANALYTICS_MESSAGE if empty else None,
        saleable=build_bucket(KIND_SALEABLE, result.top_saleable_products),
        non_saleable=build_bucket(KIND_NON_SALEABLE, result.non_saleable_products),
        rated=build_bucket(KIND_RATED, result.current_rated_products),
        distribution=build_distribution(result),
        saleable_count=result.saleable_count,
        non_saleable_count=result.non_saleable_count,
        generated_at=generated_at,
    )
