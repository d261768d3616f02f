def _get_version() -> str:
    import tomllib
    from importlib.metadata import version
    from pathlib import Path
    from typing import cast

    path = Path(__file__).parent.parent.joinpath("pyproject.toml")
    if not path.is_file():
        return version("contact-relay")

    with path.open("rb") as file:
        return cast(str, tomllib.load(file)["project"]["version"])


__version__ = _get_version()
