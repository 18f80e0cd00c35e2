from babystore.extensions import db
from decimal import Decimal


class BaseModel(db.Model):
    """Base model with an integer identity and common helpers"""

    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    def save(self):
        """Save instance to database"""
        db.session.add(self)
        db.session.commit()
        return self

    def delete(self):
        """Delete instance from database"""
        db.session.delete(self)
        db.session.commit()

    def update(self, **kwargs):
        """Update mapped columns with provided kwargs, ignoring anything else"""
        columns = self.__table__.columns.keys()
        for key, value in kwargs.items():
            if key in columns:
                setattr(self, key, value)
        db.session.commit()
        return self

    def to_dict(self):
        """Convert model to dictionary"""
        result = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)
            if isinstance(value, Decimal):
                result[column.name] = float(value)
            else:
                result[column.name] = value
        return result
