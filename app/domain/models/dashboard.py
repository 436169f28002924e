# app/domain/models/dashboard.py
from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Union

class ProductCardOut(BaseModel):
    id: Optional[Union[int, str]] = None
    name: Optional[str] = None
    units_sold: int
    stock: int
    in_stock: bool
    rating: Optional[float] = None
    price: str

class BucketOut(BaseModel):
    kind: Literal["saleable", "non-saleable", "rated"]
    title: str
    items: List[ProductCardOut]
    count: int
    empty_message: Optional[str] = None

class DistributionSliceOut(BaseModel):
    name: str
    value: int = Field(ge=0)
    color: str

class DistributionOut(BaseModel):
    slices: List[DistributionSliceOut]
    has_data: bool
    empty_message: Optional[str] = None

class DashboardOut(BaseModel):
    state: Literal["ready", "empty", "error"]
    message: Optional[str] = None
    saleable: BucketOut
    non_saleable: BucketOut
    rated: BucketOut
    distribution: DistributionOut
    saleable_count: int
    non_saleable_count: int
    generated_at: datetime
