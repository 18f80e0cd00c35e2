from .category import Category
from .product import Product
from .product_image import ProductImage
from .display import DISPLAY_METADATA, display_label, display_labels

MODELS = {
    "Category": Category,
    "Product": Product,
    "ProductImage": ProductImage,
}


def get_model(name: str):
    """Look up a model class by entity name"""
    try:
        return MODELS[name]
    except KeyError:
        raise LookupError(f"Unknown entity: {name}") from None


__all__ = [
    "Category",
    "Product",
    "ProductImage",
    "DISPLAY_METADATA",
    "display_label",
    "display_labels",
    "get_model",
]
