from babystore.models.base import BaseModel
from babystore.extensions import db


class Category(BaseModel):
    """Category model"""
    __tablename__ = 'category'

    name = db.Column(db.Text)

    # Relationships
    products = db.relationship('Product', backref='category', lazy='dynamic')

    def __repr__(self):
        return f"<Category {self.name}>"
