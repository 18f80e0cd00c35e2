from marshmallow import fields, validate, EXCLUDE
from babystore.extensions import ma


class CategoryCreateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True)


class CategoryUpdateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str()


class ProductImageCreateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    file_name = fields.Str(required=True)


class ProductImageUpdateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    file_name = fields.Str()


class ProductCreateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    description = fields.Str()
    price = fields.Decimal(places=2, validate=validate.Range(min=0))
    category_id = fields.Int(allow_none=True)
