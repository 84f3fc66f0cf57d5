"""Populate dataclass and pydantic model instances from a parsed Config.

Each field is looked up under its own name unless it carries a ``cfgname``
tag. A ``default`` tag holds a literal that is parsed according to the field
type and used when the key is missing or unusable; fields without one are
mandatory. Tags are attached with :func:`setting` on dataclasses, or through
``Field(json_schema_extra={"cfgname": ..., "default": ...})`` on pydantic
models.
"""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field, fields, is_dataclass
import logging
from typing import TYPE_CHECKING, Any, Callable, Mapping, get_type_hints

from pydantic import BaseModel

from .errors import SchemaError
from .values import Int64, ValueKind, parse_float, parse_int, parse_int64

if TYPE_CHECKING:
    from .store import Config

CFGNAME_TAG = "cfgname"
DEFAULT_TAG = "default"

_logger = logging.getLogger(__name__)

_KINDS: dict[Any, ValueKind] = {
    str: ValueKind.STRING,
    int: ValueKind.INT,
    Int64: ValueKind.INT64,
    float: ValueKind.FLOAT,
}

# Unresolved string annotations, matched by name.
_KIND_NAMES: dict[str, ValueKind] = {
    "str": ValueKind.STRING,
    "int": ValueKind.INT,
    "Int64": ValueKind.INT64,
    "float": ValueKind.FLOAT,
}

_DEFAULT_PARSERS: dict[ValueKind, Callable[[str], Any]] = {
    ValueKind.STRING: str,
    ValueKind.INT: parse_int,
    ValueKind.INT64: parse_int64,
    ValueKind.FLOAT: parse_float,
}


@dataclass(frozen=True)
class FieldBinding:
    """How one field of a bind target maps onto the store."""

    name: str
    key: str
    default: str | None
    kind: ValueKind


def setting(
    *,
    cfgname: str | None = None,
    default: str | None = None,
    initial: Any = MISSING,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field with binding tags.

    ``default`` is the configuration default literal; ``initial`` is the
    ordinary dataclass default used by the constructor. Other
    ``dataclasses.field`` keyword arguments pass through unchanged.
    """

    metadata = dict(kwargs.pop("metadata", None) or {})
    if cfgname:
        metadata[CFGNAME_TAG] = cfgname
    if default:
        metadata[DEFAULT_TAG] = default
    if initial is not MISSING:
        kwargs["default"] = initial
    return field(metadata=metadata, **kwargs)


def field_bindings(target: Any) -> list[FieldBinding]:
    """List the bindable fields of ``target`` in declaration order."""

    if isinstance(target, BaseModel):
        model = type(target)
        if model.model_config.get("frozen"):
            return []
        candidates = [
            (name, info.annotation, _tags(info.json_schema_extra))
            for name, info in model.model_fields.items()
            if not info.frozen
        ]
    elif is_dataclass(target) and not isinstance(target, type):
        if type(target).__dataclass_params__.frozen:
            return []
        hints = _type_hints(type(target))
        candidates = [
            (item.name, hints.get(item.name, item.type), item.metadata)
            for item in fields(target)
            if item.init
        ]
    else:
        raise TypeError(f"cannot bind configuration onto {type(target).__name__}")

    bindings = []
    for name, annotation, tags in candidates:
        if name.startswith("_"):
            continue
        if isinstance(annotation, str):
            kind = _KIND_NAMES.get(annotation)
        else:
            kind = _KINDS.get(annotation)
        if kind is None:
            continue
        bindings.append(
            FieldBinding(
                name=name,
                key=tags.get(CFGNAME_TAG) or name,
                default=tags.get(DEFAULT_TAG) or None,
                kind=kind,
            )
        )
    return bindings


def bind(config: "Config", target: Any) -> Any:
    """Assign every bindable field of ``target`` from ``config``.

    Raises :class:`SchemaError` for a malformed default literal and lets
    lookup errors for mandatory fields propagate. Fields assigned before
    the failure keep their new values.
    """

    for binding in field_bindings(target):
        setattr(target, binding.name, _resolve(config, binding))
        _logger.debug("field_bound", extra={"field": binding.name, "key": binding.key})
    return target


def _resolve(config: "Config", binding: FieldBinding) -> Any:
    if binding.default is None:
        getter = getattr(config, f"get_{binding.kind.value}")
        return getter(binding.key)
    try:
        default = _DEFAULT_PARSERS[binding.kind](binding.default)
    except ValueError as exc:
        raise SchemaError(binding.name, binding.default, str(exc)) from exc
    getter = getattr(config, f"get_{binding.kind.value}_default")
    return getter(binding.key, default)


def _type_hints(cls: type) -> dict[str, Any]:
    # Annotations naming classes local to a function cannot be resolved.
    try:
        return get_type_hints(cls)
    except NameError:
        return {}


def _tags(extra: Any) -> Mapping[str, Any]:
    # json_schema_extra may also be a callable; only dict tags are recognised.
    return extra if isinstance(extra, Mapping) else {}
