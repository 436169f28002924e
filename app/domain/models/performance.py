from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple, Union
from datetime import datetime

class ProductPerformanceRecord(BaseModel):
    """
    One row of the upstream `performance` array.

    Counters may be missing: `total_units_sold` / `current_stock` then stay
    None on the record and `units_sold` / `stock` read them as 0.
    `latest_rating_date` is only set once the product has been rated; naive
    timestamps are taken as UTC. Unknown upstream keys are kept as extras.
    """
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    total_units_sold: Optional[int] = Field(default=None, ge=0)
    current_stock: Optional[int] = Field(default=None, ge=0)
    average_rating: Optional[float] = None
    latest_rating_date: Optional[datetime] = None

    model_config = ConfigDict(frozen=True, extra="allow")  # immuable = safe

    @property
    def units_sold(self) -> int:
        return self.total_units_sold or 0

    @property
    def stock(self) -> int:
        return self.current_stock or 0


class ClassificationResult(BaseModel):
    """Snapshot of the three dashboard buckets plus the distribution counts."""
    top_saleable_products: Tuple[ProductPerformanceRecord, ...] = Field(default=(), alias="topSaleableProducts")
    non_saleable_products: Tuple[ProductPerformanceRecord, ...] = Field(default=(), alias="nonSaleableProducts")
    current_rated_products: Tuple[ProductPerformanceRecord, ...] = Field(default=(), alias="currentRatedProducts")
    # pre-truncation sizes of the filtered sets
    saleable_count: int = Field(default=0, ge=0, alias="saleableCount")
    non_saleable_count: int = Field(default=0, ge=0, alias="nonSaleableCount")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_empty(self) -> bool:
        return not (self.top_saleable_products or self.non_saleable_products or self.current_rated_products)
