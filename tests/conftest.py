import pytest
from decimal import Decimal
from babystore import create_app, db
from babystore.config import TestingConfig
from babystore.models.category import Category
from babystore.models.product import Product
from babystore.models.product_image import ProductImage


@pytest.fixture(scope="function")
def app():
    """Create application for testing"""
    app = create_app(TestingConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client"""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Test CLI runner"""
    return app.test_cli_runner()


# Data fixtures
@pytest.fixture
def category(app):
    """Create a test category"""
    category = Category(name="Toys")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def product(app, category):
    """Create a test product in the test category"""
    product = Product(
        category_id=category.id,
        name="Wooden Rattle",
        description="Beech wood rattle",
        price=Decimal("12.50"),
    )
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def product_image(app):
    """Create a test product image"""
    image = ProductImage(file_name="rattle.jpg")
    db.session.add(image)
    db.session.commit()
    return image
