from flask import Blueprint, request, jsonify
from babystore.models import Product, display_labels
from babystore.schemas import ProductCreateSchema
from babystore.services.product_service import ProductService
from babystore.utils.validators import validate_schema, validate_pagination

product_bp = Blueprint("products", __name__)


@product_bp.route("/", methods=["GET"])
def search_products():
    """Search products"""
    search = request.args.get("search", "")
    category_id = request.args.get("category_id", type=int)

    page, per_page = validate_pagination()

    pagination = ProductService.search_products(search=search, category_id=category_id, page=page, per_page=per_page)

    return (
        jsonify(
            {
                "products": [p.to_dict() for p in pagination.items],
                "labels": display_labels(Product),
                "total": pagination.total,
                "page": page,
                "pages": pagination.pages,
            }
        ),
        200,
    )


@product_bp.route("/", methods=["POST"])
@validate_schema(ProductCreateSchema)
def create_product():
    """Create product"""
    data = dict(request.validated_data)
    try:
        product = ProductService.create_product(data.pop("name"), **data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 404
    return jsonify({"product": product.to_dict()}), 201


@product_bp.route("/<int:product_id>", methods=["GET"])
def get_product(product_id):
    """Get product detail"""
    try:
        product = ProductService.get_product_by_id(product_id)
        return jsonify({"product": product.to_dict(), "labels": display_labels(product)}), 200
    except ValueError as e:
        return jsonify({"error": str(e)}), 404
