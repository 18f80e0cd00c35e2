from flask import Blueprint, request, jsonify
from babystore.models import Category, Product, display_labels
from babystore.schemas import CategoryCreateSchema, CategoryUpdateSchema
from babystore.services.category_service import CategoryService
from babystore.utils.validators import validate_schema, validate_pagination

category_bp = Blueprint("categories", __name__)


@category_bp.route("/", methods=["GET"])
def list_categories():
    """List categories"""
    search = request.args.get("search", "")
    page, per_page = validate_pagination()

    pagination = CategoryService.list_categories(search=search, page=page, per_page=per_page)

    return (
        jsonify(
            {
                "categories": [c.to_dict() for c in pagination.items],
                "labels": display_labels(Category),
                "total": pagination.total,
                "page": page,
                "pages": pagination.pages,
            }
        ),
        200,
    )


@category_bp.route("/", methods=["POST"])
@validate_schema(CategoryCreateSchema)
def create_category():
    """Create category"""
    data = request.validated_data
    category = CategoryService.create_category(name=data["name"])
    return jsonify({"category": category.to_dict(), "labels": display_labels(category)}), 201


@category_bp.route("/<int:category_id>", methods=["GET"])
def get_category(category_id):
    """Get category detail"""
    try:
        category = CategoryService.get_category_by_id(category_id)
        return jsonify({"category": category.to_dict(), "labels": display_labels(category)}), 200
    except ValueError as e:
        return jsonify({"error": str(e)}), 404


@category_bp.route("/<int:category_id>", methods=["PUT"])
@validate_schema(CategoryUpdateSchema)
def update_category(category_id):
    """Update category"""
    try:
        category = CategoryService.update_category(category_id, **request.validated_data)
        return jsonify({"category": category.to_dict(), "labels": display_labels(category)}), 200
    except ValueError as e:
        return jsonify({"error": str(e)}), 404


@category_bp.route("/<int:category_id>", methods=["DELETE"])
def delete_category(category_id):
    """Delete category"""
    try:
        CategoryService.delete_category(category_id)
        return jsonify({"message": "Category deleted"}), 200
    except ValueError as e:
        return jsonify({"error": str(e)}), 404


@category_bp.route("/<int:category_id>/products", methods=["GET"])
def get_category_products(category_id):
    """Products in a category"""
    page, per_page = validate_pagination()
    try:
        pagination = CategoryService.get_category_products(category_id, page=page, per_page=per_page)
    except ValueError as e:
        return jsonify({"error": str(e)}), 404

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
