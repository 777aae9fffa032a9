"""FastAPI listener that logs JSON request bodies and their inferred struct shape."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from reqparser import __version__
from reqparser.config import ReqparserSettings, load_settings
from reqparser.decoder import decode
from reqparser.errors import DecodeError, RenderError
from reqparser.observability.logging import configure_logging
from reqparser.printer import format_json
from reqparser.schema import RenderTarget, render

logger = logging.getLogger("reqparser.app")

JSON_MEDIA_TYPE = "application/json"
HANDLED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


class IndentedJSONResponse(JSONResponse):
    """JSON response rendered with four-space indentation and a trailing newline."""

    def render(self, content: Any) -> bytes:
        return (json.dumps(content, ensure_ascii=False, indent=4) + "\n").encode("utf-8")


def _is_json_request(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == JSON_MEDIA_TYPE


def _canonical_header_name(name: str) -> str:
    return "-".join(part.capitalize() for part in name.split("-"))


def dump_request(request: Request, body: bytes) -> str:
    """Return the request line, headers and body as they would appear on the wire."""
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    http_version = request.scope.get("http_version", "1.1")
    lines = [f"{request.method} {target} HTTP/{http_version}"]
    lines.extend(f"{_canonical_header_name(name)}: {value}" for name, value in request.headers.items())
    return "\r\n".join(lines) + "\r\n\r\n" + body.decode("utf-8", errors="replace")


async def _inspect_body(request: Request, settings: ReqparserSettings) -> None:
    try:
        body = await request.body()
    except ClientDisconnect as exc:
        raise HTTPException(status_code=400, detail="Error reading request body") from exc
    if not body:
        return

    try:
        value = decode(body, max_depth=settings.max_depth)
    except DecodeError as exc:
        logger.info("rejected request body", extra={"data": {"reason": str(exc), "position": exc.position}})
        raise HTTPException(status_code=400, detail="Error parsing JSON") from exc

    if settings.headers:
        logger.info("Headers:\n%s", dump_request(request, body))

    logger.info(format_json(value, settings.print_mode))

    if settings.format is not None:
        try:
            formatted = render(value, settings.format)
        except RenderError as exc:
            raise HTTPException(status_code=500, detail=f"Error formatting data: {exc}") from exc
        logger.info("Struct format:\n%s", formatted)


def create_app(settings: ReqparserSettings | None = None) -> FastAPI:
    """Build the listener app bound to an immutable settings value."""
    resolved = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        del app
        logger.info("reqparser listening", extra={"data": {"host": resolved.host, "port": resolved.port}})
        yield
        logger.info("Shutting down server...")

    app = FastAPI(title="reqparser", version=__version__, lifespan=lifespan)
    app.state.settings = resolved

    @app.api_route(
        "/{path:path}",
        methods=HANDLED_METHODS,
        description="Log the request and, for JSON bodies, the body and its struct declaration.",
    )
    async def handle_request(path: str, request: Request) -> IndentedJSONResponse:
        del path
        logger.info("Received %s request to %s", request.method, request.url.path)

        if _is_json_request(request):
            await _inspect_body(request, resolved)

        return IndentedJSONResponse(
            {
                "message": "Request processed successfully",
                "method": request.method,
                "path": request.url.path,
            }
        )

    return app


def _log_startup(settings: ReqparserSettings) -> None:
    logger.info("Starting server on port %d...", settings.port)
    if settings.format is not None:
        logger.info("Format type: %s", settings.format)
    if settings.pretty:
        logger.info("Pretty JSON printing enabled")
    if settings.headers:
        logger.info("HTTP headers display enabled")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reqparser",
        description="reqparser is a HTTP request parsing and formatting tool.",
        epilog=(
            "Without --format only the JSON body is shown; with --format the struct is shown too. "
            "--pretty frames indented JSON between delimiters, otherwise a compact JSON-Body line is shown."
        ),
    )
    parser.add_argument("--host", default=None, help="Host interface to bind (default 127.0.0.1).")
    parser.add_argument("--port", type=int, default=None, help="Port to run the server on (default 8080).")
    parser.add_argument(
        "--format",
        choices=[target.value for target in RenderTarget],
        default=None,
        help="Output format type; if not provided, no struct will be generated.",
    )
    parser.add_argument("--pretty", action="store_true", default=None, help="Pretty print JSON with delimiters.")
    parser.add_argument("--headers", action="store_true", default=None, help="Show HTTP headers in output.")
    parser.add_argument("--version", action="version", version=f"reqparser version {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = load_settings(
            host=args.host,
            port=args.port,
            format=args.format,
            pretty=args.pretty,
            headers=args.headers,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    configure_logging()
    _log_startup(settings)

    import uvicorn

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":  # pragma: no cover
    main()
