"""Code for reading resolvergen configuration."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, cast

import yaml
from typing_extensions import TypedDict

from .exceptions import ConfigurationError
from .generator import GenerateArgs
from .models import (
    ModelBinding,
    ModelDefinition,
    parse_context_reference,
    parse_model_reference,
)
from .utils.pyutils import dicttree_merge

if TYPE_CHECKING:
    from .graph import SchemaGraph

DEFAULT_CONFIG_FILE = "resolvergen.yml"


class ResolverGenSettings(TypedDict):
    """Dictionary defining the shape of the `resolvergen.yml` configuration.

    Keys are written in kebab case in the YAML file (`default-resolvers`) and
    upper snake case here. All settings are optional and have defaults as
    defined in `DEFAULT_SETTINGS`.
    """

    #: Path to a SDL file, or `module:symbol` of a strawberry/graphql-core schema
    SCHEMA: Optional[str]

    #: Path of the generated TypeScript file. Printed to stdout when missing.
    OUTPUT: Optional[str]

    #: `path/to/file.ts:TypeName` of the context passed to every resolver.
    #: When missing, `Context` is declared as `any`.
    CONTEXT: Optional[str]

    #: Schema type name -> `path/to/file.ts:ModelName`, or a mapping with
    #: `type` and `fields` keys.
    MODELS: dict[str, Any]

    #: Custom scalar name -> TypeScript type. Unmapped custom scalars are `any`.
    SCALARS: dict[str, str]

    #: If True, emit `defaultResolvers` for fields listed in a model's `fields`
    DEFAULT_RESOLVERS: bool

    #: If True, run the output through prettier
    FORMAT: bool

    #: Command used to invoke prettier
    PRETTIER_COMMAND: str


DEFAULT_SETTINGS = ResolverGenSettings(
    SCHEMA=None,
    OUTPUT=None,
    CONTEXT=None,
    MODELS={},
    SCALARS={},
    DEFAULT_RESOLVERS=True,
    FORMAT=True,
    PRETTIER_COMMAND="prettier",
)


def _settings_key(key: str) -> str:
    return key.upper().replace("-", "_")


def resolvergen_settings(
    overrides: Optional[Mapping[str, Any]] = None,
) -> ResolverGenSettings:
    """Get resolvergen settings.

    Return `overrides` merged over `DEFAULT_SETTINGS`. Keys may use either
    the YAML spelling or the settings spelling.
    """
    normalized = {_settings_key(k): v for k, v in (overrides or {}).items()}
    unknown = sorted(set(normalized) - set(DEFAULT_SETTINGS))
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    return cast(
        "ResolverGenSettings",
        dicttree_merge(DEFAULT_SETTINGS, normalized),
    )


def load_settings(path: Path) -> ResolverGenSettings:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file {path} not found") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")

    return resolvergen_settings(data)


def _resolve_path(path: Optional[str], base_dir: Path) -> Optional[str]:
    if path is None or not path.startswith("."):
        return path
    return os.path.normpath(base_dir / path)


def generate_args_from_settings(
    settings: ResolverGenSettings,
    graph: SchemaGraph,
    *,
    base_dir: Path,
) -> GenerateArgs:
    """Build generator arguments, resolving relative paths against `base_dir`."""
    base_dir = base_dir.resolve()
    models: dict[str, ModelDefinition] = {}
    for type_name, value in (settings["MODELS"] or {}).items():
        model = parse_model_reference(value)
        models[type_name] = dataclasses.replace(
            model,
            path=_resolve_path(model.path, base_dir),
        )

    context = parse_context_reference(settings["CONTEXT"])
    if context is not None:
        context = dataclasses.replace(
            context,
            path=_resolve_path(context.path, base_dir),
        )

    output = settings["OUTPUT"]
    return GenerateArgs(
        graph=graph,
        models=ModelBinding.from_mapping(models),
        context=context,
        default_resolvers=settings["DEFAULT_RESOLVERS"],
        scalars=dict(settings["SCALARS"] or {}),
        output=base_dir / output if output else None,
    )
