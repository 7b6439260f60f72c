import logging
from typing import Iterable, Mapping

from sqlalchemy.orm import Session

from models import ProductBrandMapping

logger = logging.getLogger(__name__)


def save_brand_mappings(
    db: Session,
    country_code: str,
    source: str,
    records: Iterable[Mapping[str, object]],
) -> int:
    """Upsert assignment records into the product-mapping table. Caller commits."""
    saved = 0
    for record in records:
        db.merge(
            ProductBrandMapping(
                id=record["id"],
                source=source,
                country_code=country_code,
                source_id=record["source_id"],
                title=record["title"],
                brand=record["brand"],
                priority_brand=record["priority_brand"],
                matched_brands=list(record["matched_brands"]),
            )
        )
        saved += 1
    db.flush()
    logger.info(f"Saved {saved} brand mappings for {source}/{country_code}")
    return saved


def load_brand_mapping(db: Session, mapping_id: str) -> ProductBrandMapping | None:
    return db.get(ProductBrandMapping, mapping_id)
