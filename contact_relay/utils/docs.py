from typing import TYPE_CHECKING, Any, Type

from pydantic import BaseModel, ConfigDict


if TYPE_CHECKING:
    from ..exceptions.api_exception import APIException


def example(**kwargs: Any) -> ConfigDict:
    return ConfigDict(json_schema_extra={"example": kwargs})


def get_example(model: Type[BaseModel]) -> dict[str, Any]:
    extra: Any = model.model_config.get("json_schema_extra") or {}
    return dict(extra.get("example", {}))


def responses(default: Any, *args: Type["APIException"]) -> dict[int | str, dict[str, Any]]:
    exceptions: dict[int, list[Type["APIException"]]] = {}
    for exc in args:
        exceptions.setdefault(exc.status_code, []).append(exc)

    out: dict[int | str, dict[str, Any]] = {200: {"model": default}}
    for code, excs in exceptions.items():
        out[code] = {
            "description": "\n\n".join(f"**{exc.detail}**: {exc.description}" for exc in excs),
            "content": {
                "application/json": {
                    "examples": {exc.__name__: {"value": {"success": False, "error": exc.detail}} for exc in excs}
                }
            },
        }

    return out
