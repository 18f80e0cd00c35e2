import logging
from babystore.models.category import Category
from babystore.models.product import Product
from babystore.extensions import db

logger = logging.getLogger(__name__)


class CategoryService:
    """Category service handling category operations"""

    @staticmethod
    def create_category(name: str) -> Category:
        """Create new category"""
        category = Category(name=name)

        db.session.add(category)
        db.session.commit()

        logger.info(f"Created category {category.id} ({category.name})")
        return category

    @staticmethod
    def get_category_by_id(category_id: int) -> Category:
        """Get category by ID"""
        category = db.session.get(Category, category_id)
        if not category:
            raise ValueError("Category not found")
        return category

    @staticmethod
    def update_category(category_id: int, **kwargs) -> Category:
        """Update category"""
        category = CategoryService.get_category_by_id(category_id)
        kwargs.pop("id", None)
        category.update(**kwargs)

        logger.info(f"Updated category {category.id}")
        return category

    @staticmethod
    def delete_category(category_id: int):
        """Delete category, leaving its products without a category"""
        category = CategoryService.get_category_by_id(category_id)

        detached = Product.query.filter_by(category_id=category.id).update(
            {"category_id": None}
        )
        category.delete()

        logger.info(f"Deleted category {category_id}, detached {detached} products")

    @staticmethod
    def list_categories(search: str = None, page: int = 1, per_page: int = 20):
        """List categories with an optional name filter"""
        query = Category.query

        if search:
            query = query.filter(Category.name.contains(search))

        return query.order_by(Category.name.asc(), Category.id.asc()).paginate(
            page=page, per_page=per_page, error_out=False
        )

    @staticmethod
    def get_category_products(category_id: int, page: int = 1, per_page: int = 20):
        """Products owned by a category"""
        category = CategoryService.get_category_by_id(category_id)

        return category.products.order_by(Product.id.asc()).paginate(
            page=page, per_page=per_page, error_out=False
        )
