# validators.py
import re
from dataclasses import dataclass
from typing import Any, Optional

_MISSING = object()
_ALPHA_RE = re.compile(r"[A-Za-z]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str
    value: Any = _MISSING

    def to_dict(self):
        error = {"param": self.field, "msg": self.message}
        if self.value is not _MISSING:
            error["value"] = self.value
        return error


def as_text(value) -> str:
    """Convert a JSON wire value to the string the rules check against."""
    if value is None or value is _MISSING:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    # Lists and objects have no meaningful text form
    return ""


def as_position(value) -> Optional[int]:
    text = as_text(value)
    if not _INT_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Past the interpreter's digit limit for int conversion
        return None


class Rule:
    # When a bailing rule fails, the remaining rules of the field are skipped
    bail = False

    def __init__(self, message: str):
        self.message = message

    def check(self, value, store) -> bool:
        raise NotImplementedError

    def evaluate(self, field: str, value, store=None) -> Optional[ValidationError]:
        if self.check(value, store):
            return None
        return ValidationError(field, self.message, value)


class AlphabeticOnly(Rule):
    def check(self, value, store):
        return bool(_ALPHA_RE.fullmatch(as_text(value)))


class LengthBetween(Rule):
    def __init__(self, min_length: int, max_length: int, message: str):
        super().__init__(message)
        self.min_length = min_length
        self.max_length = max_length

    def check(self, value, store):
        return self.min_length <= len(as_text(value)) <= self.max_length


class Numeric(Rule):
    def __init__(self, message: str, bail: bool = True):
        super().__init__(message)
        self.bail = bail

    def check(self, value, store):
        return as_position(value) is not None


class ExistingUser(Rule):
    def check(self, value, store):
        position = as_position(value)
        return position is not None and store is not None and store.exists(position)


REGISTER_SCHEMA = {
    "name": [
        AlphabeticOnly("Name must have only alphabetical characters."),
        LengthBetween(2, 50, "Name must be between 2 and 50 characters."),
    ],
}

LOGIN_SCHEMA = {
    "userID": [
        Numeric("Authentication requires a number."),
        ExistingUser("That user does not exist."),
    ],
}


def validate(body: dict, schema: dict, store=None) -> list:
    """Run every rule of every field in `schema` against `body`.

    Returns the failures in field order, then rule order. An empty list means
    the body is valid.
    """
    errors = []
    for field, rules in schema.items():
        value = body.get(field, _MISSING)
        for rule in rules:
            error = rule.evaluate(field, value, store)
            if error is None:
                continue
            errors.append(error)
            if rule.bail:
                break
    return errors
