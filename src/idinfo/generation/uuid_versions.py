"""UUID generation by explicit version (v1, v3, v4, v5, v6, v7)."""

from __future__ import annotations

import uuid

import uuid6

from idinfo.exceptions import GenerationError

SUPPORTED_VERSIONS = ("v1", "v3", "v4", "v5", "v6", "v7")


def generate_uuid(version: str = "v4", namespace_name: str = "idinfo-generated") -> str:
    """Generate a UUID of the given version.

    v3 and v5 hash `namespace_name` under the DNS namespace and are therefore
    deterministic. The others draw on the clock and/or randomness.
    """
    version = version.lower()
    if version == "v1":
        return str(uuid.uuid1())
    if version == "v3":
        return str(uuid.uuid3(uuid.NAMESPACE_DNS, namespace_name))
    if version == "v4":
        return str(uuid.uuid4())
    if version == "v5":
        return str(uuid.uuid5(uuid.NAMESPACE_DNS, namespace_name))
    if version == "v6":
        return str(uuid6.uuid6())
    if version == "v7":
        return str(uuid6.uuid7())
    raise GenerationError(
        f"unsupported UUID version '{version}'. Supported versions: {', '.join(SUPPORTED_VERSIONS)}"
    )
