# -*- coding: utf-8 -*-
"""JSON persistence of datum transformation parameter sets.

A parameter file is a JSON list of entries::

    [
      {
        "from": "WGS 1984",
        "to": "Ordnance Survey 1936",
        "params": {"dx": -446.448, "dy": 125.157, "dz": -542.06,
                   "rx": 0.1502, "ry": 0.247, "rz": 0.8421,
                   "scale": 20.4894}
      }
    ]

Only explicitly set directions are written; loading re-derives the reverse
directions through ``TransformContext.set_transform_params``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import orjson
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import TypeAdapter
from pydantic import ValidationError
from pydantic import field_validator

from geodatum_lib.enums import Datum
from geodatum_lib.errors import InvalidInputError
from geodatum_lib.errors import UnsupportedFormatError
from geodatum_lib.models import DatumTransform

if TYPE_CHECKING:
    from geodatum_lib.context import TransformContext

logger = logging.getLogger(__name__)

__all__ = [
    "TransformEntry",
    "dump_transforms",
    "load_transforms",
    "save_transforms",
]


class TransformEntry(BaseModel):
    """One stored ``from -> to`` parameter set."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_datum: Datum = Field(alias="from")
    to_datum: Datum = Field(alias="to")
    params: DatumTransform

    @field_validator("from_datum", "to_datum", mode="before")
    @classmethod
    def normalize_datum(cls, value: str | Datum) -> Datum | None:
        return Datum.normalize(value)


_ENTRIES = TypeAdapter(list[TransformEntry])


def dump_transforms(ctx: TransformContext) -> bytes:
    """Serialize the context's explicitly set parameter sets to JSON."""
    entries = [
        TransformEntry(from_datum=src, to_datum=dst, params=params)
        for src, dst, params in ctx.transforms
    ]
    return orjson.dumps(
        _ENTRIES.dump_python(entries, mode="json", by_alias=True),
        option=orjson.OPT_INDENT_2,
    )


def save_transforms(ctx: TransformContext, path: Path) -> None:
    """Write the context's parameter sets to a JSON file.

    Args:
        ctx: Context whose transformation table is saved
        path: Destination file
    """
    path = Path(path)
    path.write_bytes(dump_transforms(ctx))
    logger.debug("Saved %d parameter sets to %s", len(ctx.transforms), path)


def load_transforms(ctx: TransformContext, path: Path) -> int:
    """Load parameter sets from a JSON file into the context.

    Every entry is checked before any is applied, so a rejected file leaves
    the table untouched. Entries are applied in file order; a later entry
    for the same pair (in either direction) replaces an earlier one.

    Args:
        ctx: Context receiving the parameters
        path: JSON file to read

    Returns:
        Number of entries applied

    Raises:
        UnsupportedFormatError: If the file is not a valid parameter file
        InvalidInputError: If an entry maps a datum to itself
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    try:
        entries = _ENTRIES.validate_python(orjson.loads(path.read_bytes()))
    except (orjson.JSONDecodeError, ValidationError) as e:
        raise ctx.report(
            UnsupportedFormatError, f"Invalid parameter file {path}: {e}"
        ) from e

    for entry in entries:
        if entry.from_datum is entry.to_datum:
            raise ctx.report(
                InvalidInputError,
                f"Parameter file {path} maps {entry.from_datum.value} to itself",
            )

    with ctx.lock:
        for entry in entries:
            ctx.set_transform_params(
                entry.from_datum, entry.to_datum, entry.params
            )

    logger.debug("Loaded %d parameter sets from %s", len(entries), path)
    return len(entries)
