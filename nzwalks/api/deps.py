"""
API dependency helpers.

Route identifiers are taken as plain strings and parsed here so a malformed
id is reported like any other field validation failure (400) instead of
falling through to routing.
"""
import uuid

from fastapi import Path
from fastapi.exceptions import RequestValidationError


def parse_identifier(id: str = Path(..., description="Resource identifier (UUID)")) -> uuid.UUID:
    try:
        return uuid.UUID(id)
    except ValueError:
        raise RequestValidationError([
            {
                "type": "uuid_parsing",
                "loc": ("path", "id"),
                "msg": "Input should be a valid UUID",
                "input": id,
            }
        ])
