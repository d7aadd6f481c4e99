"""Mapping of domain errors onto HTTP responses."""

from fastapi import HTTPException

from src.domain.entities.errors import InvalidArgumentError


def invalid_argument_to_http(exc: InvalidArgumentError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": exc.message, "errors": exc.errors},
    )
