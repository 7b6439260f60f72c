import enum
from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, DateTime, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


class CountryCode(str, enum.Enum):
    LV = "lv"
    LT = "lt"
    EE = "ee"


class Source(str, enum.Enum):
    APOTHEKA = "apotheka"
    BENU = "benu"
    EUROAPTIEKA = "euroaptieka"
    MENESS_APTIEKA = "meness_aptieka"


class ProductBrandMapping(Base):
    """Brand assigned to a scraped product, keyed by source, country and source id."""

    __tablename__ = "product_brand_mappings"
    __table_args__ = (
        UniqueConstraint("source", "country_code", "source_id", name="uq_product_brand_mapping_source"),
        {'extend_existing': True},
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    source: Mapped[str] = mapped_column(String(100), nullable=False)
    country_code: Mapped[str] = mapped_column(String(8), nullable=False)
    source_id: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    brand: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    priority_brand: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    matched_brands: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
