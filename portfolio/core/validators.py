from pydantic import field_validator


def reject_null(*fields: str):
    """Validator for partial-update models: the listed fields may be omitted but never sent as null."""

    def _check(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    return field_validator(*fields)(_check)
