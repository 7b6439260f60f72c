"""Loaders for the curated brand relations and the scraped pharmacy catalog."""

import json
import logging
from pathlib import Path
from typing import List, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from models.schemas import BrandConnectionRecord, PharmacyItemRecord
from services.brand_matching.models import BrandRelation, Product

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class CatalogShapeError(ValueError):
    """A catalog file or one of its records does not have the expected shape."""


def load_brand_relations(path: Union[str, Path]) -> List[BrandRelation]:
    """Read brand relation rows (``manufacturer_p1`` / ``manufacturers_p2``)."""
    rows = _load_records(path, BrandConnectionRecord)
    relations = [BrandRelation(row.manufacturer_p1, row.manufacturers_p2) for row in rows]
    logger.info(f"Loaded {len(relations)} brand relations from {path}")
    return relations


def load_pharmacy_items(path: Union[str, Path]) -> List[Product]:
    """Read scraped pharmacy products (``title`` / ``source_id``)."""
    rows = _load_records(path, PharmacyItemRecord)
    products = [Product(title=row.title, source_id=row.source_id) for row in rows]
    logger.info(f"Loaded {len(products)} pharmacy items from {path}")
    return products


def _load_records(path: Union[str, Path], model: Type[RecordT]) -> List[RecordT]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogShapeError(f"{path}: invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise CatalogShapeError(f"{path}: expected a JSON array of records, got {type(data).__name__}")

    return [_validate_record(model, record, path, index) for index, record in enumerate(data)]


def _validate_record(model: Type[RecordT], record: object, path: Path, index: int) -> RecordT:
    if not isinstance(record, dict):
        raise CatalogShapeError(f"{path}: record {index} is not an object: {record!r}")
    try:
        return model.model_validate(record)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<record>" for err in e.errors())
        raise CatalogShapeError(f"{path}: record {index} has invalid fields ({fields}): {record!r}") from e
