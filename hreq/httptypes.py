JsonValue = (
    None | bool | int | float | str | list["JsonValue"] | dict[str, "JsonValue"]
)
JsonDict = dict[str, JsonValue]
Headers = dict[str, str]
FormParams = list[tuple[str, str]]
