from hreq.logs import masked_header_value, request_repr


def test_request_repr() -> None:
    method = "POST"
    url = "https://api.example.com/users"
    headers = {
        "Authorization": "Bearer 123456",
        "Content-Type": "application/json",
    }
    body = '{"a":1}'
    result = request_repr(
        method=method,
        url=url,
        headers=headers,
        body=body,
        sensitive_headers={"Authorization"},
    )
    assert (
        result
        == "{'method': 'POST', 'url': 'https://api.example.com/users', 'headers': {'Authorization': 'Bearer 123*** (13 chars)', 'Content-Type': 'application/json'}, 'body': '{\"a\":1}'}"
    )

    result = request_repr(
        method=method,
        url=url,
        headers=headers,
        body=None,
        sensitive_headers=None,
    )
    assert (
        result
        == "{'method': 'POST', 'url': 'https://api.example.com/users', 'headers': {'Authorization': 'Bearer 123456', 'Content-Type': 'application/json'}, 'body': None}"
    )


def test_request_repr__sensitive_header_case_insensitive() -> None:
    result = request_repr(
        method="GET",
        url="http://localhost:59447/",
        headers={"authorization": "abc123"},
        body=b"",
        sensitive_headers={"Authorization"},
    )
    assert "abc123***" in result
    assert "(6 chars)" in result


def test_masked_header_value__bytes() -> None:
    assert masked_header_value(b"abc", sensitive=False) == "abc"
