"""Minimal OpenAPI 3.0 and Swagger UI: /openapi.json and /docs."""
from __future__ import annotations

import dataclasses
import types
import typing
from typing import Any

from starlette.routing import Route

# (path, method) -> OpenAPI request body schema, parameters, tags
RouteSchemas = dict[tuple[str, str], dict[str, Any]]


def _unwrap_optional(t: Any) -> Any:
    """X | None -> X; X | Y -> X (first member is the documented type)."""
    args = [a for a in typing.get_args(t) if a is not type(None)]
    if typing.get_origin(t) in (typing.Union, types.UnionType) and args:
        return args[0]
    return t


def _py_type_to_json_type(t: Any) -> str:
    t = _unwrap_optional(t)
    origin = typing.get_origin(t) or t
    if origin is bool:
        return "boolean"
    if origin is int:
        return "integer"
    if origin is float:
        return "number"
    if origin in (list, tuple):
        return "array"
    if origin is dict:
        return "object"
    return "string"


def _field_types(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        return {f.name: f.type for f in dataclasses.fields(cls)}


def _is_required(f: dataclasses.Field) -> bool:
    return f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING


def schema_from_dataclass(cls: type) -> dict[str, Any]:
    """Build JSON schema from a dataclass so Swagger shows required fields and types."""
    if not dataclasses.is_dataclass(cls):
        return {"type": "object"}
    hints = _field_types(cls)
    props: dict[str, Any] = {}
    required: list[str] = []
    for f in dataclasses.fields(cls):
        if f.name.startswith("_"):
            continue
        props[f.name] = {"type": _py_type_to_json_type(hints.get(f.name, str)), "description": f.name.replace("_", " ")}
        if _is_required(f):
            required.append(f.name)
    schema: dict[str, Any] = {"type": "object", "properties": props}
    if required:
        schema["required"] = required
    return schema


def parameters_from_dataclass(cls: type) -> list[dict[str, Any]]:
    """Build OpenAPI query parameters from a dataclass (for GET queries)."""
    if not dataclasses.is_dataclass(cls):
        return []
    hints = _field_types(cls)
    return [
        {
            "name": f.name,
            "in": "query",
            "required": _is_required(f),
            "schema": {"type": _py_type_to_json_type(hints.get(f.name, str))},
        }
        for f in dataclasses.fields(cls)
        if not f.name.startswith("_")
    ]


def build_openapi_spec(
    routes: list[Any],
    *,
    title: str = "API",
    version: str = "0.1.0",
    route_schemas: RouteSchemas | None = None,
    exclude: set[str] | None = None,
) -> dict[str, Any]:
    """Build OpenAPI 3.0 spec from Starlette routes and optional per-route schemas."""
    route_schemas = route_schemas or {}
    exclude = exclude or set()
    paths: dict[str, Any] = {}
    for route in routes:
        if not isinstance(route, Route) or route.path in exclude:
            continue
        ops = paths.setdefault(route.path, {})
        for method in sorted(route.methods or {"GET"}):
            if method == "HEAD":
                continue
            method_lower = method.lower()
            op: dict[str, Any] = {
                "summary": f"{method} {route.path}",
                "responses": {
                    "200": {"description": "OK", "content": {"application/json": {"schema": {"type": "object"}}}},
                    "400": {"description": "Invalid input", "content": {"application/json": {"schema": {"type": "object"}}}},
                },
            }
            schema = route_schemas.get((route.path, method_lower), {})
            for key in ("requestBody", "parameters", "tags"):
                if key in schema:
                    op[key] = schema[key]
            op.setdefault("tags", ["default"])
            ops[method_lower] = op
    return {
        "openapi": "3.0.0",
        "info": {"title": title, "version": version},
        "paths": paths,
    }


SWAGGER_UI_HTML = """<!DOCTYPE html>
<html>
<head>
  <title>{title}</title>
  <link rel="stylesheet" type="text/css" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
  <script>
    SwaggerUIBundle({{
      url: "{openapi_path}",
      dom_id: "#swagger-ui",
    }});
  </script>
</body>
</html>
"""
