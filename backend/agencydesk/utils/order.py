from agencydesk.extensions import db

def compact_order(query, model, order_field="position"):
    """
    Re-assigns sequential order values (1..N) for a scoped query.
    """
    items = query.order_by(getattr(model, order_field).asc()).all()

    for index, item in enumerate(items, start=1):
        setattr(item, order_field, index)

    db.session.flush()
    return items
