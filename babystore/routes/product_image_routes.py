from flask import Blueprint, request, jsonify
from babystore.models import ProductImage, display_labels
from babystore.schemas import ProductImageCreateSchema, ProductImageUpdateSchema
from babystore.services.product_image_service import ProductImageService
from babystore.utils.validators import validate_schema, validate_pagination

product_image_bp = Blueprint("product_images", __name__)


@product_image_bp.route("/", methods=["GET"])
def list_images():
    page, per_page = validate_pagination()
    pagination = ProductImageService.list_images(page=page, per_page=per_page)

    return (
        jsonify(
            {
                "images": [i.to_dict() for i in pagination.items],
                "labels": display_labels(ProductImage),
                "total": pagination.total,
                "page": page,
                "pages": pagination.pages,
            }
        ),
        200,
    )


@product_image_bp.route("/", methods=["POST"])
@validate_schema(ProductImageCreateSchema)
def create_image():
    image = ProductImageService.create_image(request.validated_data["file_name"])
    return jsonify({"image": image.to_dict(), "labels": display_labels(image)}), 201


@product_image_bp.route("/<int:image_id>", methods=["GET"])
def get_image(image_id):
    try:
        image = ProductImageService.get_image_by_id(image_id)
        return jsonify({"image": image.to_dict(), "labels": display_labels(image)}), 200
    except ValueError as e:
        return jsonify({"error": str(e)}), 404


@product_image_bp.route("/<int:image_id>", methods=["PUT"])
@validate_schema(ProductImageUpdateSchema)
def update_image(image_id):
    try:
        image = ProductImageService.update_image(image_id, **request.validated_data)
        return jsonify({"image": image.to_dict(), "labels": display_labels(image)}), 200
    except ValueError as e:
        return jsonify({"error": str(e)}), 404


@product_image_bp.route("/<int:image_id>", methods=["DELETE"])
def delete_image(image_id):
    try:
        ProductImageService.delete_image(image_id)
        return jsonify({"message": "Product image deleted"}), 200
    except ValueError as e:
        return jsonify({"error": str(e)}), 404
