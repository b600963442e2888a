"""
Schema naming built on the inflection engine.
"""

from .model_name import (
    ModelNotFoundError,
    ModelSchema,
    init_get_model_name,
    normalize_schema,
)

__all__ = [
    "ModelNotFoundError",
    "ModelSchema",
    "init_get_model_name",
    "normalize_schema",
]
