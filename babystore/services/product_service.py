import logging
from babystore.models.product import Product
from babystore.models.category import Category
from babystore.extensions import db

logger = logging.getLogger(__name__)


class ProductService:
    """Product service handling product operations"""

    @staticmethod
    def create_product(name: str, **kwargs) -> Product:
        """Create new product, optionally inside a category"""
        category_id = kwargs.get("category_id")
        if category_id is not None and not db.session.get(Category, category_id):
            raise ValueError("Category not found")

        product = Product(
            name=name,
            description=kwargs.get("description"),
            price=kwargs.get("price"),
            category_id=category_id,
        )

        db.session.add(product)
        db.session.commit()

        logger.info(f"Created product {product.id} in category {category_id}")
        return product

    @staticmethod
    def get_product_by_id(product_id: int) -> Product:
        """Get product by ID"""
        product = db.session.get(Product, product_id)
        if not product:
            raise ValueError("Product not found")
        return product

    @staticmethod
    def search_products(search: str = None, category_id: int = None,
    page: int = 1, per_page: int = 20):
        """Search products with filters"""
        query = Product.query

        if search:
            query = query.filter(Product.name.contains(search))

        if category_id:
            query = query.filter_by(category_id=category_id)

        return query.order_by(Product.id.asc()).paginate(
            page=page, per_page=per_page, error_out=False
        )
