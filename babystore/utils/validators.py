from functools import wraps
from flask import request, jsonify, current_app
from marshmallow import ValidationError


def validate_schema(schema_class):
    """Decorator to validate request data against schema"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            schema = schema_class()
            try:
                validated_data = schema.load(request.get_json(silent=True) or {})
                request.validated_data = validated_data
                return f(*args, **kwargs)
            except ValidationError as err:
                return jsonify({'error': 'Validation error', 'messages': err.messages}), 400
        return decorated_function
    return decorator


def validate_pagination():
    """Validate pagination parameters"""
    default_per_page = current_app.config.get('DEFAULT_PER_PAGE', 20)
    max_per_page = current_app.config.get('MAX_PER_PAGE', 100)

    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', default_per_page, type=int)

    if page < 1:
        page = 1
    if per_page < 1 or per_page > max_per_page:
        per_page = default_per_page

    return page, per_page
