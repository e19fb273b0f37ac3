from .httptypes import Headers


def request_repr(
    method: str,
    url: str,
    headers: Headers,
    body: str | bytes | None,
    sensitive_headers: set[str] | None = None,
) -> str:
    if sensitive_headers is None:
        sensitive_headers = set()

    if isinstance(body, bytes):
        body = body.decode(errors="replace")

    return str(
        {
            "method": method,
            "url": url,
            "headers": masked_headers(headers, sensitive_headers),
            "body": body,
        },
    )


def masked_headers(
    headers: Headers,
    sensitive_headers: set[str],
) -> dict[str, str]:
    sensitive = {header.lower() for header in sensitive_headers}
    return {
        header: masked_header_value(value, sensitive=header.lower() in sensitive)
        for header, value in headers.items()
    }


def masked_header_value(value: str | bytes, *, sensitive: bool) -> str:
    if isinstance(value, bytes):
        value = value.decode()

    if sensitive:
        length = len(value)
        begin = value[:10]
        return f"{begin}*** ({length} chars)"

    return value
