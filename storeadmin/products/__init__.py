"""Products: models, variant composition, SKU generation and the
transactional product service."""

from storeadmin.products.composer import ComposedProduct, ComposedVariant, VariantComposer
from storeadmin.products.models import Image, Product, ProductOption, Variant, VariantOption
from storeadmin.products.repository import ProductRepository
from storeadmin.products.service import ProductService, RegeneratedSku
from storeadmin.products.sku import generate_sku, sku_code

__all__ = [
    # Models
    "Image",
    "Product",
    "ProductOption",
    "Variant",
    "VariantOption",
    # Composition
    "ComposedProduct",
    "ComposedVariant",
    "VariantComposer",
    # SKU
    "generate_sku",
    "sku_code",
    # Repository / Service
    "ProductRepository",
    "ProductService",
    "RegeneratedSku",
]
