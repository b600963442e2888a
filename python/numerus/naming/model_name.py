"""
Model name resolution for plural-named schemas.

Storage adapters ask for a model by its logical key ("user") or by its
declared name ("app_user"). When the schema is configured with plural table
names, the declared name goes through safe_plural(), which appends "s"
unless the name already reads as plural. This keeps table names identical to
the legacy naive-suffix naming ("address" → "addresss").
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from numerus.inflection import safe_plural
from numerus.logging_config import get_logger

logger = get_logger(__name__)


class ModelNotFoundError(LookupError):
    """Raised when a model is neither a schema key nor a declared model name."""

    def __init__(self, model: str):
        self.model = model
        super().__init__(f'Model "{model}" not found in schema')


@dataclass(frozen=True)
class ModelSchema:
    """A schema entry: the declared model (table) name and its fields."""

    model_name: str
    fields: dict[str, Any] = field(default_factory=dict)


SchemaEntry = Union[ModelSchema, Mapping[str, Any], str]


def normalize_schema(schema: Mapping[str, SchemaEntry]) -> dict[str, ModelSchema]:
    """
    Coerce schema entries into ModelSchema objects.

    Accepts ModelSchema instances, plain strings (the declared name), or
    mappings with a "model_name" (or camelCase "modelName") key. Entries
    without a declared name default to their logical key.
    """
    normalized = {}
    for key, entry in schema.items():
        if isinstance(entry, ModelSchema):
            normalized[key] = entry
        elif isinstance(entry, str):
            normalized[key] = ModelSchema(model_name=entry)
        else:
            name = entry.get("model_name") or entry.get("modelName") or key
            normalized[key] = ModelSchema(model_name=name, fields=dict(entry.get("fields") or {}))
    return normalized


def _find_key(schema: Mapping[str, ModelSchema], name: str) -> Optional[str]:
    if name in schema:
        return name
    for key, entry in schema.items():
        if entry.model_name == name:
            return key
    return None


def init_get_model_name(
    use_plural: bool,
    schema: Mapping[str, SchemaEntry],
) -> Callable[[str], str]:
    """
    Build the model name resolver for one schema.

    Args:
        use_plural: Whether table names are pluralized
        schema: Logical model key → schema entry (see normalize_schema)

    Returns:
        get_model_name(model) → declared name, passed through safe_plural()
        when use_plural is set

    Raises (from the returned function):
        ModelNotFoundError: model matches no key and no declared name

    Examples:
        >>> get_model_name = init_get_model_name(True, {"user": "app_user"})
        >>> get_model_name("user")
        "app_users"
        >>> get_model_name("app_user")
        "app_users"

        >>> get_model_name = init_get_model_name(True, {"session": "session"})
        >>> get_model_name("sessions")  # already plural, no double "s"
        "sessions"
    """
    models = normalize_schema(schema)

    def resolve_key(model: str) -> str:
        # "users" may be a plural request for the "user" model
        if use_plural and model.endswith("s"):
            key = _find_key(models, model[:-1])
            if key is not None:
                return key

        key = _find_key(models, model)
        if key is None:
            logger.warning(f"Unknown model requested: {model!r} (known: {sorted(models)})")
            raise ModelNotFoundError(model)
        return key

    def get_model_name(model: str) -> str:
        declared = models[resolve_key(model)].model_name
        if not use_plural:
            return declared
        return safe_plural(declared)

    return get_model_name
