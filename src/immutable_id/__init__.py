"""immutable-id — GUID ⇄ ImmutableID conversion for directory sync.

Converts textual GUIDs to the Base64 "ImmutableID" hard-match key used
by identity providers, and back again.
"""

from immutable_id.version import __version__

__all__: list[str] = ["__version__"]
