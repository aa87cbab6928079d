"""Backing model and context bindings.

A binding maps a schema type name to the TypeScript type that flows through
resolvers as the parent value of that type. Bindings are plain lookups: a miss
is never an error, callers substitute a marker type instead.
"""

from __future__ import annotations

import dataclasses
import os
import types
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import ConfigurationError

__all__ = [
    "ContextDefinition",
    "ModelBinding",
    "ModelDefinition",
    "import_specifier",
    "parse_context_reference",
    "parse_model_reference",
]

_TS_EXTENSIONS = (".d.ts", ".tsx", ".ts")


@dataclasses.dataclass(frozen=True)
class ModelDefinition:
    name: str
    path: Optional[str] = None
    #: Field names known to exist on the model, used for default resolvers.
    fields: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class ContextDefinition:
    name: str
    path: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class ModelBinding:
    models: Mapping[str, ModelDefinition] = dataclasses.field(
        default_factory=lambda: types.MappingProxyType({}),
    )

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Union[str, ModelDefinition]],
    ) -> ModelBinding:
        models = {
            type_name: (
                model
                if isinstance(model, ModelDefinition)
                else ModelDefinition(name=model)
            )
            for type_name, model in mapping.items()
        }
        return cls(types.MappingProxyType(models))

    def get(self, type_name: str) -> Optional[ModelDefinition]:
        return self.models.get(type_name)

    def unbound(self, type_names: Iterable[str]) -> list[str]:
        return [name for name in type_names if name not in self.models]


def _split_reference(reference: str) -> tuple[Optional[str], str]:
    # rpartition keeps Windows drive letters in the path
    path, sep, name = reference.rpartition(":")
    if not sep:
        return None, reference
    if not path or not name:
        raise ConfigurationError(f'Invalid type reference "{reference}"')
    return path, name


def parse_model_reference(value: Any) -> ModelDefinition:
    """Parse a model entry from the configuration.

    Accepts either `"path/to/models.ts:UserModel"`, a bare `"UserModel"`
    for a globally available type, or a mapping with `type` and an optional
    `fields` list.
    """
    if isinstance(value, str):
        path, name = _split_reference(value)
        return ModelDefinition(name=name, path=path)

    if isinstance(value, Mapping) and isinstance(value.get("type"), str):
        path, name = _split_reference(value["type"])
        fields = value.get("fields") or ()
        if not isinstance(fields, (list, tuple)) or not all(
            isinstance(f, str) for f in fields
        ):
            raise ConfigurationError(
                f'Model "{name}" fields must be a list of field names',
            )
        return ModelDefinition(name=name, path=path, fields=tuple(fields))

    raise ConfigurationError(f"Invalid model definition: {value!r}")


def parse_context_reference(value: Optional[str]) -> Optional[ContextDefinition]:
    if not value:
        return None

    path, name = _split_reference(value)
    return ContextDefinition(name=name, path=path)


def _strip_extension(path: str) -> str:
    for extension in _TS_EXTENSIONS:
        if path.endswith(extension):
            return path[: -len(extension)]
    return path


def import_specifier(path: str, output: Optional[Path] = None) -> str:
    """Return the module specifier used to import `path` from `output`.

    Package specifiers (`@app/models`) are returned untouched. File paths lose
    their TypeScript extension and, when the output file is known, are made
    relative to its directory.
    """
    if not (path.startswith(".") or os.path.isabs(path)):
        return path

    module_path = _strip_extension(path)
    if output is None:
        return module_path

    relative = Path(
        os.path.relpath(module_path, start=output.parent),
    ).as_posix()
    if relative.startswith(("./", "../")):
        return relative
    return f"./{relative}"
