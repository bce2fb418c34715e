"""Content-tree JSON decoding and encoding.

Converts content-tree JSON (one object per node, discriminated by ``type``)
into typed nodes and back. Decoding is the only validation the package
performs: unknown tags, missing required fields, wrongly typed scalars and
nodes placed in a slot that does not accept them raise DecodeError. A JSON
null stands for the field default, and a missing or null root body decodes
to None so the renderer reports it as a missing node. Heading levels are
left to the renderer.

JSON keys are camelCase (``layoutWidth``); node fields are snake_case
(``layout_width``). Wrapper nodes have no JSON object of their own: each
child of a slot is decoded and wrapped, and wrappers are flattened again on
encoding.

Example:
    from external_bodyxml.serialization import from_json, to_json

    root = from_json(b'{"type": "root", "body": {"type": "body", "children": []}}')
    assert from_json(to_json(root)) == root

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
import types
import typing
from dataclasses import MISSING, fields
from functools import cache
from typing import Any, Literal, get_args, get_origin, get_type_hints

from external_bodyxml.errors import DecodeError
from external_bodyxml.nodes import NODE_TYPES, Node, Wrapper

_JSON_KINDS: dict[type, str] = {
    bool: "boolean",
    int: "integer",
    float: "number",
    str: "string",
    list: "array",
    dict: "object",
    type(None): "null",
}


def _json_key(name: str) -> str:
    """Map a snake_case field name to its camelCase JSON key."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@cache
def _field_hints(node_cls: type[Node]) -> dict[str, Any]:
    return get_type_hints(node_cls)


def _json_kind(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    return _JSON_KINDS.get(type(value), type(value).__name__)


def _describe(hint: Any) -> str:
    origin = get_origin(hint)
    if origin in (types.UnionType, typing.Union):
        return " or ".join(_describe(arg) for arg in get_args(hint))
    if origin is Literal:
        return "string"
    return _JSON_KINDS.get(origin or hint, str(hint))


def _matches(value: Any, hint: Any) -> bool:
    """Check a scalar JSON value against a field annotation."""
    if hint is Any:
        return True
    origin = get_origin(hint)
    if origin in (types.UnionType, typing.Union):
        return any(_matches(value, arg) for arg in get_args(hint))
    if origin is Literal:
        return isinstance(value, type(get_args(hint)[0]))
    if origin is not None:
        hint = origin
    if hint is bool:
        return isinstance(value, bool)
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if hint is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, hint)


def from_dict(data: Any, *, path: str = "$") -> Node:
    """Decode a content-tree JSON object into a typed node.

    Uses the ``type`` discriminator to pick the node class, then decodes
    every field according to its annotation. Keys the node does not know
    (such as the content-tree ``data`` field) are ignored.

    Args:
        data: Parsed JSON object.
        path: Location of ``data`` in the payload, used in error messages.

    Returns:
        Typed node (frozen dataclass).

    Raises:
        DecodeError: If ``data`` does not describe a valid node.

    """
    if not isinstance(data, dict):
        msg = f"expected object, got {_json_kind(data)}"
        raise DecodeError(msg, path)

    type_name = data.get("type")
    if type_name is None:
        raise DecodeError("missing 'type' field", path)

    node_cls = NODE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if node_cls is None:
        msg = f"unknown node type: {type_name!r}"
        raise DecodeError(msg, path)

    hints = _field_hints(node_cls)
    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        key = _json_key(f.name)
        field_path = f"{path}.{key}"
        value = data.get(key)
        if value is None:
            if _node_class(hints[f.name]) is not None:
                # absent nodes are left for the renderer to report
                kwargs[f.name] = None
                continue
            if f.default is not MISSING or f.default_factory is not MISSING:
                continue
            if key not in data:
                msg = f"missing required field {key!r} on '{type_name}'"
                raise DecodeError(msg, path)
        kwargs[f.name] = _decode_value(value, hints[f.name], field_path)

    return node_cls(**kwargs)


def _node_class(hint: Any) -> type[Node] | None:
    """Return the node class of a ``Node`` or ``Node | None`` annotation."""
    if get_origin(hint) in (types.UnionType, typing.Union):
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        hint = args[0] if len(args) == 1 else None
    if isinstance(hint, type) and issubclass(hint, Node):
        return hint
    return None


def _decode_value(value: Any, hint: Any, path: str) -> Any:
    """Decode a single field value according to its annotation."""
    if get_origin(hint) is tuple:
        item_hint = get_args(hint)[0]
        if not isinstance(value, list):
            msg = f"expected array, got {_json_kind(value)}"
            raise DecodeError(msg, path)
        return tuple(
            _decode_child(item, item_hint, f"{path}[{i}]") for i, item in enumerate(value)
        )
    node_cls = _node_class(hint)
    if node_cls is not None:
        return _decode_child(value, node_cls, path)
    if not _matches(value, hint):
        msg = f"expected {_describe(hint)}, got {_json_kind(value)}"
        raise DecodeError(msg, path)
    return value


def _decode_child(value: Any, expected: type[Node], path: str) -> Node:
    """Decode a child node, enforcing what the slot accepts."""
    node = from_dict(value, path=path)
    if issubclass(expected, Wrapper):
        if node.node_type not in expected.accepts:
            msg = f"'{node.node_type}' is not allowed in {expected.node_type}"
            raise DecodeError(msg, path)
        return expected(embedded=node)
    if type(node) is not expected:
        msg = f"expected '{expected.node_type}', got '{node.node_type}'"
        raise DecodeError(msg, path)
    return node


def from_json(payload: str | bytes | bytearray) -> Node:
    """Decode a content-tree JSON payload.

    Args:
        payload: JSON text, or UTF-8/16/32 encoded bytes.

    Returns:
        The decoded top-level node (normally a Root).

    Raises:
        DecodeError: If the payload is not valid JSON or not a valid tree.
            The underlying exception is chained as ``__cause__``.

    """
    try:
        raw = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        msg = f"invalid JSON: {exc}"
        raise DecodeError(msg) from exc
    except RecursionError as exc:
        raise DecodeError("payload is nested too deeply") from exc

    try:
        return from_dict(raw)
    except RecursionError as exc:
        raise DecodeError("payload is nested too deeply") from exc


def to_dict(node: Node) -> dict[str, Any]:
    """Encode a node as a content-tree JSON object.

    Wrappers are flattened to their embedded node.

    """
    if isinstance(node, Wrapper):
        return to_dict(node.embedded)

    result: dict[str, Any] = {"type": node.node_type}
    for f in fields(node):
        result[_json_key(f.name)] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # JSON values: str, int, float, bool, None, dict, list
    return value


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string.

    Output is deterministic (sorted keys).

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)
