import enum
import typing
from dataclasses import fields, is_dataclass

# Type marker key used for serialization/deserialization
_TYPE_KEY = "_type"

# Registry mapping type names to classes (populated lazily)
_TYPE_REGISTRY: dict[str, type] = {}


def _serialize_for_json(value: typing.Any) -> typing.Any:
    if isinstance(value, enum.Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        result = {
            _TYPE_KEY: type(value).__name__,
        }
        for item in fields(value):
            result[item.name] = _serialize_for_json(getattr(value, item.name))
        return result
    if isinstance(value, dict):
        return {str(key): _serialize_for_json(val) for key, val in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_serialize_for_json(item) for item in value]
    return value


def serialize_extraction(value: typing.Any) -> dict:
    """Turn an extraction result into a JSON-compatible dictionary."""
    serialized = _serialize_for_json(value)
    if isinstance(serialized, dict):
        return serialized
    return {"value": serialized}


def _get_type_registry() -> dict[str, type]:
    """Lazily populate and return the type registry."""
    if _TYPE_REGISTRY:
        return _TYPE_REGISTRY

    from rtf2text.parsing.extractors import data_types

    for name in dir(data_types):
        obj = getattr(data_types, name)
        if isinstance(obj, type) and is_dataclass(obj):
            _TYPE_REGISTRY[name] = obj

    return _TYPE_REGISTRY


def _deserialize_value(value: typing.Any, expected_type: typing.Any) -> typing.Any:
    if value is None:
        return None

    if isinstance(value, dict) and _TYPE_KEY in value:
        return _deserialize_dataclass(value)

    origin = typing.get_origin(expected_type)
    if origin is list and isinstance(value, list):
        args = typing.get_args(expected_type)
        item_type = args[0] if args else typing.Any
        return [_deserialize_value(item, item_type) for item in value]

    if isinstance(expected_type, type) and is_dataclass(expected_type):
        if isinstance(value, dict):
            return _deserialize_dataclass(value, expected_type)

    return value


def _deserialize_dataclass(
    data: dict, expected_class: typing.Optional[type] = None
) -> typing.Any:
    """Deserialize a dictionary to a dataclass instance."""
    registry = _get_type_registry()

    type_name = data.get(_TYPE_KEY)
    if type_name and type_name in registry:
        cls = registry[type_name]
    elif expected_class is not None:
        cls = expected_class
    else:
        # Can't determine the class, return dict as-is
        return data

    field_types = typing.get_type_hints(cls)
    kwargs = {}
    for item in fields(cls):
        if item.name in data:
            kwargs[item.name] = _deserialize_value(
                data[item.name], field_types.get(item.name, typing.Any)
            )
    return cls(**kwargs)


def deserialize_extraction(data: dict) -> typing.Any:
    """
    Deserialize a JSON dictionary back to an extraction result.

    This is the inverse of serialize_extraction().

    Raises:
        ValueError: If the data doesn't contain valid type information

    Example:
        >>> content = next(read_file("document.rtf"))
        >>> restored = deserialize_extraction(content.to_json())
        >>> assert restored.get_full_text() == content.get_full_text()
    """
    if not isinstance(data, dict):
        raise ValueError("Input must be a dictionary")

    if _TYPE_KEY not in data:
        raise ValueError(
            f"Input dictionary must contain '{_TYPE_KEY}' key for deserialization"
        )

    return _deserialize_dataclass(data)
