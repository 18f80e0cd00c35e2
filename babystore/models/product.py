from babystore.models.base import BaseModel
from babystore.extensions import db


class Product(BaseModel):
    __tablename__ = "product"

    category_id = db.Column(
        db.Integer,
        db.ForeignKey("category.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name = db.Column(db.String(255), nullable=False, index=True)
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(10, 2))

    def __repr__(self):
        return f"<Product {self.name}>"
