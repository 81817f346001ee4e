"""
DomainModule — one object per bounded context.
Describes DI bindings and queries; each query is exposed over HTTP.
"""
from __future__ import annotations

import json
import re
from typing import Any, Callable, Type

from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from cartrules.core.app import Application
from cartrules.core.logging import get_logger
from cartrules.core.module import Module
from cartrules.core.openapi import parameters_from_dataclass, schema_from_dataclass
from cartrules.ddd.queries import Query
from cartrules.errors import InvalidInput, PricingError

logger = get_logger(__name__)


def _snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def error_response(error: PricingError, status_code: int = 400) -> JSONResponse:
    """Standard error envelope: {"error": {"code": "...", "message": "..."}}."""
    return JSONResponse({"error": {"code": error.code, "message": error.message}}, status_code=status_code)


class DomainModule(Module):
    """
    One object = full bounded context.
    .bind() .query()
    Register via app.register(module).
    """

    def __init__(self, name: str, prefix: str | None = None) -> None:
        self.name = name
        self.prefix = prefix or f"/{name}"
        self._bindings: list[tuple[Type[Any], Type[Any]]] = []
        self._queries: list[tuple[Type[Query], Type[Any] | Callable[..., Any]]] = []

    def bind(self, interface: Type[Any], impl: Type[Any]) -> DomainModule:
        """Register any interface → implementation for DI (e.g. domain services, strategies)."""
        self._bindings.append((interface, impl))
        return self

    def query(self, query_type: Type[Query], handler: Type[Any] | Callable[..., Any]) -> DomainModule:
        self._queries.append((query_type, handler))
        return self

    def query_path(self, query_type: Type[Query]) -> str:
        return f"{self.prefix.rstrip('/')}/queries/{_snake(query_type.__name__)}"

    def register_into(self, app: Application) -> None:
        container = app.container

        # Bindings (domain services, strategies): interface -> implementation
        for iface, impl in self._bindings:
            container.register_class(impl)
            if iface is not impl:
                container.register(iface, lambda c=container, i=impl: c.resolve(i))

        for query_type, handler in self._queries:
            if isinstance(handler, type):
                container.register_class(handler)
            app.add_route(
                self.query_path(query_type),
                self._make_query_endpoint(query_type, handler, container),
                methods=["GET", "POST"],
                openapi_parameters=parameters_from_dataclass(query_type),
                openapi_body_schema=schema_from_dataclass(query_type),
                openapi_tags=[self.name],
            )

    def _make_query_endpoint(
        self, query_type: Type[Query], handler: Type[Any] | Callable[..., Any], container: Any
    ) -> Callable:
        async def endpoint(request: Request) -> Response:
            if request.method == "POST":
                try:
                    body = await request.json()
                except json.JSONDecodeError:
                    body = {}
            else:
                body = dict(request.query_params)
            try:
                if not isinstance(body, dict):
                    raise InvalidInput("request body must be a JSON object")
                try:
                    query = query_type(**body)
                except TypeError as e:
                    raise InvalidInput(f"bad {query_type.__name__} payload: {e}") from e
                h = container.resolve(handler) if isinstance(handler, type) else handler
                result = await self._call_handler(h, query)
            except PricingError as e:
                logger.warning(
                    "%s %s rejected: %s",
                    request.method,
                    request.url.path,
                    e,
                    extra={"method": request.method, "path": request.url.path, "error_code": e.code},
                )
                return error_response(e)
            return JSONResponse(result if result is not None else {})

        return endpoint

    async def _call_handler(self, handler: Any, payload: Any) -> Any:
        result = handler(payload)
        if hasattr(result, "__await__"):
            return await result
        return result
