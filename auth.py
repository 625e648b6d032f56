# auth.py
from validators import LOGIN_SCHEMA, REGISTER_SCHEMA, as_position, validate


def register_user(users, data):
    """Validate a registration body and append it to `users`.

    Returns (position, errors). Position is None when validation failed, in
    which case the store is left untouched.
    """
    errors = validate(data, REGISTER_SCHEMA, users)
    if errors:
        return None, errors
    return users.add(data), []


def authenticate_user(users, data):
    errors = validate(data, LOGIN_SCHEMA, users)
    if errors:
        return None, errors
    return as_position(data["userID"]), []
