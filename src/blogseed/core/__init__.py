from .fields import DateTimeField, Field, FieldError, StringField, TextField
from .model import Model, ModelConfigurationError, ModelOptions

__all__ = [
    "DateTimeField",
    "Field",
    "FieldError",
    "Model",
    "ModelConfigurationError",
    "ModelOptions",
    "StringField",
    "TextField",
]
