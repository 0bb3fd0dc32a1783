"""Load parameter sets from YAML files.

The file is a flat mapping of keys to scalar values:

    role: admin
    suspended: false
    seats: 3

Values are coerced to strings because parameter sources only deal in
strings. Booleans become "true"/"false" and null becomes "".
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import RootModel, ValidationError, model_validator

from exptree.errors import ParamsFileError
from exptree.params import Map

logger = logging.getLogger(__name__)


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ParamsDocument(RootModel[dict[str, str]]):
    """Validated contents of a parameter file."""

    @model_validator(mode="before")
    @classmethod
    def coerce_scalars(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                f"expected a mapping of keys to values, got {type(data).__name__}"
            )
        coerced: dict[str, str] = {}
        for key, value in data.items():
            if isinstance(value, (dict, list, tuple, set)):
                raise ValueError(f"value for '{key}' must be a scalar")
            coerced[_to_str(key)] = _to_str(value)
        return coerced


def parse_params(text: str, source: str = "<string>") -> Map:
    """Parse YAML text into a Map.

    Raises:
        ParamsFileError: If the text is not valid YAML or not a flat mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParamsFileError(f"{source}: invalid YAML: {e}") from e

    try:
        document = ParamsDocument.model_validate(data)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise ParamsFileError(f"{source}: {messages}") from e

    return Map(document.root)


def load_params_file(path: Path | str) -> Map:
    """Load a parameter file into a Map.

    Args:
        path: Path to a YAML file

    Returns:
        Parameter source with every value coerced to a string

    Raises:
        ParamsFileError: If the file cannot be read or is malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ParamsFileError(f"{path}: cannot read file ({e.strerror})") from e

    params = parse_params(text, source=str(path))
    logger.debug("Loaded %d parameter(s) from %s", len(params), path)
    return params
