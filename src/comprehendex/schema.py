from __future__ import annotations

import json
from functools import cache
from importlib import resources
from typing import Any, Mapping

SCHEMA_FILE: str = "outcome.schema.json"


@cache
def load_schema() -> Mapping[str, Any]:
    with resources.files("comprehendex").joinpath(SCHEMA_FILE).open("r", encoding="utf-8") as handle:
        data: Mapping[str, Any] = json.load(handle)
    return data


def schema_version() -> str:
    return str(load_schema().get("x-comprehendex-schema-version", "unknown"))
