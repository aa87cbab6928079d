from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Optional

from strawberry.exceptions.exception import StrawberryException

if TYPE_CHECKING:
    from strawberry.exceptions.exception_source import ExceptionSource


class ResolverGenError(StrawberryException):
    def __init__(self, message: str):
        self.message = message
        self.rich_message = f"[bold red]{message}"
        self.annotation_message = message

        super().__init__(self.message)

    @cached_property
    def exception_source(self) -> Optional[ExceptionSource]:  # pragma: no cover
        return None


class ConfigurationError(ResolverGenError):
    """The configuration file is missing, unreadable or malformed."""


class SchemaLoadError(ResolverGenError):
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason

        super().__init__(f'Unable to load schema from "{source}": {reason}')
        self.rich_message = (
            f"[bold red]Unable to load schema from [underline]{source}[/]: {reason}"
        )
        self.suggestion = (
            "Point `schema` at a .graphql file or at a `module:symbol` path "
            "resolving to a strawberry or graphql-core schema"
        )
