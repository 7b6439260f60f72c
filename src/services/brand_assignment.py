"""
Batch brand assignment for one country/source catalog.

Builds the brand matcher once, matches every product title, writes the JSON
artifact and, when a database session is given, upserts the product mappings.
"""

import hashlib
import json
import logging
import uuid
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from sqlalchemy.orm import Session

from config import settings
from models import CountryCode, Source
from services.brand_matching import BrandMatcher, BrandRelation, MatchPolicy, Product
from services.catalog_loader import load_brand_relations, load_pharmacy_items
from services.mapping_persistence import save_brand_mappings

logger = logging.getLogger(__name__)


@dataclass
class AssignmentSummary:
    country_code: str
    source: str
    total: int
    matched: int
    output_path: str
    persisted: int = 0

    @property
    def unmatched(self) -> int:
        return self.total - self.matched

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def product_mapping_id(source: str, country_code: str, source_id: str) -> str:
    """Stable key for a product: hash of ``{source}_{country_code}_{source_id}``."""
    key = f"{source}_{country_code}_{source_id}"
    return str(uuid.UUID(hashlib.md5(key.encode("utf-8")).hexdigest()))


def assignment_output_path(
    country_code: str,
    source: str,
    output_dir: Union[str, Path, None] = None,
) -> Path:
    base = Path(output_dir if output_dir is not None else settings.output_dir)
    return base / country_code / f"brands_{source}.json"


def build_assignment_records(
    matcher: BrandMatcher,
    products: Sequence[Product],
    country_code: str,
    source: str,
) -> List[Dict[str, object]]:
    records = []
    for product in products:
        result = matcher.match(product.title)
        records.append({
            "id": product_mapping_id(source, country_code, product.source_id),
            "source_id": product.source_id,
            **result.to_dict(),
        })
    return records


def write_assignment_output(records: List[Dict[str, object]], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(records, f, ensure_ascii=False, indent=2)
    return path


def assign_brands(
    country_code: Union[CountryCode, str],
    source: Union[Source, str],
    relations: Optional[Sequence[BrandRelation]] = None,
    products: Optional[Sequence[Product]] = None,
    policy: Optional[MatchPolicy] = None,
    output_dir: Union[str, Path, None] = None,
    db: Optional[Session] = None,
) -> AssignmentSummary:
    """Assign brands to every product of one country/source catalog."""
    country_code, source = _validate_scope(country_code, source)
    logger.info(f"Starting brand assignment: country={country_code}, source={source}")

    if relations is None:
        relations = load_brand_relations(settings.brand_connections_path)
    if products is None:
        products = load_pharmacy_items(settings.pharmacy_items_path)

    matcher = BrandMatcher.from_relations(relations, policy)
    try:
        records = build_assignment_records(matcher, products, country_code, source)
    finally:
        matcher.reset()

    path = write_assignment_output(records, assignment_output_path(country_code, source, output_dir))
    persisted = save_brand_mappings(db, country_code, source, records) if db is not None else 0

    matched = sum(1 for record in records if record["brand"] is not None)
    summary = AssignmentSummary(
        country_code=country_code,
        source=source,
        total=len(records),
        matched=matched,
        output_path=str(path),
        persisted=persisted,
    )
    logger.info(
        f"Finished brand assignment: country={country_code}, source={source}, "
        f"products={summary.total}, matched={summary.matched}, unmatched={summary.unmatched}"
    )
    return summary


def _validate_scope(country_code: Union[CountryCode, str], source: Union[Source, str]) -> Tuple[str, str]:
    try:
        country = CountryCode(_scope_value(country_code))
    except ValueError:
        raise ValueError(f"Unknown country code: {country_code!r}") from None
    try:
        shop = Source(_scope_value(source))
    except ValueError:
        raise ValueError(f"Unknown source: {source!r}") from None
    return country.value, shop.value


def _scope_value(value: Union[CountryCode, Source, str, None]):
    if isinstance(value, (CountryCode, Source)):
        return value
    return (value or "").strip().lower()
