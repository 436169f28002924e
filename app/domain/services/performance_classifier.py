"""
Classification of a product performance snapshot into the dashboard buckets.

Three independent selections over the same records:
- saleable: units sold above SALEABLE_MIN_UNITS, best sellers first, top N
- non-saleable: 0 < units sold < NON_SALEABLE_MAX_UNITS, sorted the same way, top N
- rated today: latest rating falls on the UTC calendar day of `now`, uncapped

A record can be both non-saleable (or saleable) and rated today.
Sorting is stable, ties keep input order. Nothing here raises on bad input.
"""
import logging
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Iterable, List, Optional, Union

from pydantic import ValidationError

from app.core.config import Settings
from app.domain.models.performance import ClassificationResult, ProductPerformanceRecord
from app.domain.services.constants import NON_SALEABLE_MAX_UNITS, SALEABLE_MIN_UNITS, TOP_N

logger = logging.getLogger(__name__)

DayLike = Union[datetime, date]


def utc_day(value: DayLike) -> date:
    """Calendar day of `value` in UTC. Naive datetimes are read as UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(timezone.utc).date()
    return value


def same_utc_day(a: DayLike, b: DayLike) -> bool:
    return utc_day(a) == utc_day(b)


def coerce_record(raw: Any) -> Optional[ProductPerformanceRecord]:
    """
    Turn one upstream item into a record.
    Invalid fields are dropped (so counters fall back to 0 and a bad rating
    date excludes the record from the rated bucket). Non-mapping items are
    skipped by returning None.
    """
    if isinstance(raw, ProductPerformanceRecord):
        return raw
    if not isinstance(raw, Mapping):
        logger.warning("performance record skipped: not an object type=%s", type(raw).__name__)
        return None
    try:
        return ProductPerformanceRecord.model_validate(raw)
    except ValidationError as e:
        bad = {err["loc"][0] for err in e.errors() if err.get("loc")}
        logger.warning("performance record id=%s dropped invalid fields=%s", raw.get("id"), sorted(map(str, bad)))
        cleaned = {k: v for k, v in raw.items() if k not in bad}
        return ProductPerformanceRecord.model_validate(cleaned)


class PerformanceClassifier:
    """
    Stateless classifier; thresholds are fixed at construction.
    Each call to `classify` builds a new result from scratch.
    """

    def __init__(
        self,
        saleable_min_units: int = SALEABLE_MIN_UNITS,
        non_saleable_max_units: int = NON_SALEABLE_MAX_UNITS,
        top_n: int = TOP_N,
    ):
        self.saleable_min_units = saleable_min_units
        self.non_saleable_max_units = non_saleable_max_units
        self.top_n = top_n

    @classmethod
    def from_settings(cls, settings: Settings) -> "PerformanceClassifier":
        return cls(
            saleable_min_units=settings.saleable_min_units,
            non_saleable_max_units=settings.non_saleable_max_units,
            top_n=settings.top_n,
        )

    def is_saleable(self, record: ProductPerformanceRecord) -> bool:
        return record.units_sold > self.saleable_min_units

    def is_non_saleable(self, record: ProductPerformanceRecord) -> bool:
        # zero sold means no data, not low performing
        return 0 < record.units_sold < self.non_saleable_max_units

    @staticmethod
    def is_rated_on(record: ProductPerformanceRecord, day: date) -> bool:
        if record.latest_rating_date is None:
            return False
        try:
            rated_day = utc_day(record.latest_rating_date)
        except (OverflowError, ValueError) as e:
            # e.g. 9999-12-31T23:00-05:00 has no UTC equivalent
            logger.warning("performance record id=%s rating date out of range err=%s", record.id, e)
            return False
        return rated_day == day

    @staticmethod
    def _by_units_desc(records: List[ProductPerformanceRecord]) -> List[ProductPerformanceRecord]:
        # sorted() stays stable with reverse=True
        return sorted(records, key=lambda r: r.units_sold, reverse=True)

    def classify(self, records: Optional[Iterable[Any]], now: DayLike) -> ClassificationResult:
        items = [r for r in (coerce_record(raw) for raw in (records or ())) if r is not None]
        today = utc_day(now)

        saleable = self._by_units_desc([r for r in items if self.is_saleable(r)])
        non_saleable = self._by_units_desc([r for r in items if self.is_non_saleable(r)])
        rated = [r for r in items if self.is_rated_on(r, today)]

        result = ClassificationResult(
            top_saleable_products=tuple(saleable[: self.top_n]),
            non_saleable_products=tuple(non_saleable[: self.top_n]),
            current_rated_products=tuple(rated),
            saleable_count=len(saleable),
            non_saleable_count=len(non_saleable),
        )
        logger.debug(
            "classify records=%s day=%s saleable=%s non_saleable=%s rated=%s",
            len(items), today.isoformat(), len(saleable), len(non_saleable), len(rated),
        )
        return result


_default = PerformanceClassifier()


def classify(records: Optional[Iterable[Any]], now: DayLike) -> ClassificationResult:
    """Classify with the default thresholds (20 / 3 / top 10)."""
    return _default.classify(records, now)
