__version__ = "0.1.0"

from .formatting import format_code  # noqa: E402
from .generator import GenerateArgs, generate, generate_declarations  # noqa: E402
from .graph import SchemaGraph  # noqa: E402
from .introspection import (  # noqa: E402
    load_schema_graph,
    schema_graph_from_schema,
    schema_graph_from_sdl,
)
from .models import ContextDefinition, ModelBinding, ModelDefinition  # noqa: E402

__all__ = [
    "ContextDefinition",
    "GenerateArgs",
    "ModelBinding",
    "ModelDefinition",
    "SchemaGraph",
    "__version__",
    "format_code",
    "generate",
    "generate_declarations",
    "load_schema_graph",
    "schema_graph_from_schema",
    "schema_graph_from_sdl",
]
