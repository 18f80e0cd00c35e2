from babystore.models.base import BaseModel
from babystore.extensions import db


class ProductImage(BaseModel):
    """Reference to an image file stored outside the database"""

    __tablename__ = "product_image"

    file_name = db.Column(db.Text)

    def __repr__(self):
        return f"<ProductImage {self.file_name}>"
