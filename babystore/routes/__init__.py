from babystore.routes.category_routes import category_bp
from babystore.routes.product_routes import product_bp
from babystore.routes.product_image_routes import product_image_bp
from babystore.routes.metadata_routes import metadata_bp


def register_blueprints(app):
    """Register all blueprints"""
    app.register_blueprint(category_bp, url_prefix='/api/categories')
    app.register_blueprint(product_bp, url_prefix='/api/products')
    app.register_blueprint(product_image_bp, url_prefix='/api/product-images')
    app.register_blueprint(metadata_bp, url_prefix='/api/metadata')
