import re

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}$)(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,63}$"
)


def error(field, message):
    return {"field": field, "message": message}


def is_slug(value):
    return isinstance(value, str) and bool(SLUG_RE.match(value))
