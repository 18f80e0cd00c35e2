import logging
from babystore.models.product_image import ProductImage
from babystore.extensions import db

logger = logging.getLogger(__name__)


class ProductImageService:

    @staticmethod
    def create_image(file_name: str) -> ProductImage:
        image = ProductImage(file_name=file_name).save()
        logger.info(f"Registered product image {image.id} ({image.file_name})")
        return image

    @staticmethod
    def get_image_by_id(image_id: int) -> ProductImage:
        image = db.session.get(ProductImage, image_id)
        if not image:
            raise ValueError("Product image not found")
        return image

    @staticmethod
    def update_image(image_id: int, **kwargs) -> ProductImage:
        image = ProductImageService.get_image_by_id(image_id)
        kwargs.pop("id", None)
        return image.update(**kwargs)

    @staticmethod
    def delete_image(image_id: int):
        image = ProductImageService.get_image_by_id(image_id)
        image.delete()
        logger.info(f"Deleted product image {image_id}")

    @staticmethod
    def list_images(page: int = 1, per_page: int = 20):
        return ProductImage.query.order_by(ProductImage.id.asc()).paginate(
            page=page, per_page=per_page, error_out=False
        )
