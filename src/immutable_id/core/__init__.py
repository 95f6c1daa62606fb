"""Core layer — pure GUID/ImmutableID transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from immutable_id.core.converter import (
    guid_to_immutable_id,
    guids_to_immutable_ids,
    immutable_id_to_guid,
    immutable_ids_to_guids,
)
from immutable_id.core.models import ConversionRecord, GuidRecord, ImmutableIdRecord

__all__: list[str] = [
    "ConversionRecord",
    "GuidRecord",
    "ImmutableIdRecord",
    "guid_to_immutable_id",
    "guids_to_immutable_ids",
    "immutable_id_to_guid",
    "immutable_ids_to_guids",
]
