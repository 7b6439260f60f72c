from .brand_assignment import AssignmentSummary, assign_brands, product_mapping_id
from .catalog_loader import CatalogShapeError, load_brand_relations, load_pharmacy_items
from .mapping_persistence import save_brand_mappings

__all__ = [
    "AssignmentSummary",
    "CatalogShapeError",
    "assign_brands",
    "load_brand_relations",
    "load_pharmacy_items",
    "product_mapping_id",
    "save_brand_mappings",
]
