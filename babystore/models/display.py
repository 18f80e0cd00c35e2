"""Display metadata for the generated admin/storefront forms.

Labels are kept out of the model classes in a plain mapping keyed by entity
name and then by field name. Presentation code asks for a label through
:func:`display_label` and never reads the mapping directly, so a field with no
entry still gets a readable name.
"""

DISPLAY_METADATA = {
    "Category": {
        "name": {"display_label": "Category Name"},
    },
    "ProductImage": {
        "file_name": {"display_label": "File"},
    },
}

# Field names that should not be title-cased word by word
ACRONYMS = {"id": "ID"}


def entity_name(entity) -> str:
    """Return the entity name for a model class, a model instance or a name"""
    if isinstance(entity, str):
        return entity
    if isinstance(entity, type):
        return entity.__name__
    return type(entity).__name__


def humanize(field: str) -> str:
    """Turn a column name into a label, e.g. ``file_name`` -> ``File Name``"""
    words = [w for w in field.split("_") if w]
    return " ".join(ACRONYMS.get(w.lower(), w.capitalize()) for w in words)


def display_label(entity, field: str) -> str:
    """Resolve the label a form should show for ``field`` of ``entity``"""
    options = DISPLAY_METADATA.get(entity_name(entity), {}).get(field, {})
    return options.get("display_label") or humanize(field)


def display_labels(entity) -> dict:
    """Labels for every mapped column of a model class or instance"""
    model = entity if isinstance(entity, type) else type(entity)
    return {
        column.name: display_label(model, column.name)
        for column in model.__table__.columns
    }
