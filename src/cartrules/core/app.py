"""Application — composed from modules via app.register(module). Backed by Starlette (ASGI)."""
from __future__ import annotations

from typing import Any

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route

from cartrules.core.config import Config
from cartrules.core.container import Container
from cartrules.core.logging import get_logger
from cartrules.core.module import Module
from cartrules.core.openapi import SWAGGER_UI_HTML, RouteSchemas, build_openapi_spec

logger = get_logger(__name__)


class Application:
    """
    Application. Composed from modules via register(module).
    Itself an ASGI app: the Starlette app is built on first request and rebuilt after new routes.
    """

    def __init__(self, config: Config | None = None) -> None:
        self._modules: list[Module] = []
        self._container = Container()
        self._routes: list[Route] = []
        self._route_schemas: RouteSchemas = {}
        self._internal_paths: set[str] = set()
        self._openapi_title = "API"
        self._openapi_version = "0.1.0"
        self._asgi: Starlette | None = None
        self.config = config if config is not None else Config()
        self._container.register_instance(Config, self.config)
        self._container.register_instance(type(self.config), self.config)
        self._container.register_instance("config", self.config)

    def register(self, module: Module) -> Application:
        """Register a module (DomainModule, etc.). Returns self for chaining."""
        module.register_into(self)
        self._modules.append(module)
        logger.debug("registered module %s", getattr(module, "name", type(module).__name__))
        return self

    def add_route(
        self,
        path: str,
        endpoint: Any,
        methods: list[str] | None = None,
        *,
        openapi_body_schema: dict[str, Any] | None = None,
        openapi_parameters: list[dict[str, Any]] | None = None,
        openapi_tags: list[str] | None = None,
    ) -> None:
        """Add an HTTP route. openapi_* are used for the OpenAPI document (tags, schema)."""
        if methods is None:
            methods = ["GET"]
        path = path if path.startswith("/") else f"/{path}"
        self._routes.append(Route(path, endpoint, methods=methods))
        for method in methods:
            schema: dict[str, Any] = {}
            if openapi_tags:
                schema["tags"] = openapi_tags
            if method.upper() == "GET" and openapi_parameters:
                schema["parameters"] = openapi_parameters
            elif method.upper() != "GET" and openapi_body_schema:
                schema["requestBody"] = {
                    "required": True,
                    "content": {"application/json": {"schema": openapi_body_schema}},
                }
            self._route_schemas[(path, method.lower())] = schema
        self._asgi = None

    def openapi(
        self,
        *,
        title: str = "API",
        version: str = "0.1.0",
        docs_path: str = "/docs",
        openapi_path: str = "/openapi.json",
    ) -> Application:
        """Serve the OpenAPI document at openapi_path and Swagger UI at docs_path."""
        self._openapi_title = title
        self._openapi_version = version
        self._internal_paths.update({docs_path, openapi_path})

        async def openapi_endpoint(request: Request) -> JSONResponse:
            return JSONResponse(
                build_openapi_spec(
                    self._routes,
                    title=self._openapi_title,
                    version=self._openapi_version,
                    route_schemas=self._route_schemas,
                    exclude=self._internal_paths,
                )
            )

        async def docs_endpoint(request: Request) -> HTMLResponse:
            return HTMLResponse(SWAGGER_UI_HTML.format(title=self._openapi_title, openapi_path=openapi_path))

        self._routes.append(Route(openapi_path, openapi_endpoint, methods=["GET"]))
        self._routes.append(Route(docs_path, docs_endpoint, methods=["GET"]))
        self._asgi = None
        return self

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container

    def build(self) -> Starlette:
        """Starlette app over the routes registered so far."""
        if self._asgi is None:
            self._asgi = Starlette(routes=list(self._routes))
        return self._asgi

    async def __call__(self, scope: Any, receive: Any, send: Any) -> None:
        await self.build()(scope, receive, send)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Run HTTP server with uvicorn (blocks). host/port default to config."""
        import uvicorn

        host = host or self.config.host
        port = port or self.config.port
        logger.info("serving on http://%s:%s", host, port)
        uvicorn.run(self, host=host, port=port, log_config=None)
