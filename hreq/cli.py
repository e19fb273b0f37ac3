import logging
from typing import Annotated

import typer

from .client import DispatchError, HttpClient
from .environments import DEFAULT_PORT
from .requests_factory import InvalidHeaderError, RequestFactory, parse_headers
from .schemas import BodyMode

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


def validate_headers(values: list[str] | None) -> list[str] | None:
    try:
        parse_headers(values or [])
    except InvalidHeaderError as error:
        raise typer.BadParameter(str(error)) from error

    return values


def configure_logging(verbose: bool) -> None:  # noqa: FBT001
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@app.command()
def request(  # noqa: PLR0913
    ctx: typer.Context,
    host: Annotated[
        str,
        typer.Option(
            "--host",
            "-h",
            help="Host, e.g. https://example.com, or one of prod, dev, local",
        ),
    ] = "",
    path: Annotated[str, typer.Option("--path", "-p", help="Request path")] = "",
    method: Annotated[str, typer.Option("--method", "-X", help="HTTP method")] = "GET",
    port: Annotated[
        int,
        typer.Option("--port", "-P", help="Port used with -h local"),
    ] = DEFAULT_PORT,
    data: Annotated[
        str,
        typer.Option(
            "--data",
            "-d",
            help="Request body (JSON objects are converted to form data)",
        ),
    ] = "",
    json_body: Annotated[
        str,
        typer.Option(
            "--json",
            "-json",
            help="JSON request body (with Content-Type: application/json)",
        ),
    ] = "",
    token: Annotated[
        str,
        typer.Option("--token", "-t", help="Authorization token"),
    ] = "",
    header: Annotated[
        list[str] | None,
        typer.Option(
            "--header",
            "-H",
            help="HTTP header in key:value format, repeatable",
            callback=validate_headers,
        ),
    ] = None,
    body_mode: Annotated[
        BodyMode,
        typer.Option(
            "--body-mode",
            help="auto: convert JSON -d bodies to form data; "
            "method: send -d as JSON for POST, PUT and DELETE",
        ),
    ] = BodyMode.auto,
    verbose: Annotated[  # noqa: FBT002
        bool,
        typer.Option("--verbose", "-v", help="Log the outgoing request"),
    ] = False,
) -> None:
    """Send one HTTP request and print the response body."""
    if not host:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)

    configure_logging(verbose)

    descriptor = RequestFactory(body_mode=body_mode).create_request(
        host=host,
        path=path,
        method=method,
        port=port,
        data=data,
        json_body=json_body,
        token=token,
        headers=parse_headers(header or []),
    )

    try:
        response = HttpClient().send(descriptor)
    except DispatchError as error:
        logger.error("%s", error)  # noqa: TRY400
        raise typer.Exit(code=1) from error

    body = response.content.decode(errors="replace")
    typer.echo(f"Response from {descriptor.url}:\n{body}")


if __name__ == "__main__":
    app()
