"""Build the ``info.json`` manifest for a new plugin."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field

from create_chatterino_plugin.models import Permission

MANIFEST_FILENAME = "info.json"


@dataclass(frozen=True)
class ManifestDefaults:
    description: str = "A new Chatterino plugin."
    authors: tuple[str, ...] = ("Your Name",)
    homepage: str = "https://github.com/yourusername/your-repo"
    tags: tuple[str, ...] = ("plugin",)
    version: str = "0.0.1"
    license: str = "MIT"


DEFAULT_MANIFEST = ManifestDefaults()


@dataclass
class Manifest:
    # Field order is the key order of the serialized file.
    name: str
    description: str
    authors: list[str]
    homepage: str
    tags: list[str]
    version: str
    license: str
    permissions: list[dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


def build_manifest(
    name: str,
    permissions: Iterable[Permission],
    defaults: ManifestDefaults = DEFAULT_MANIFEST,
) -> Manifest:
    """Map a name and permissions onto a Manifest.

    Permissions keep the caller's order. Duplicates are not removed, so a
    repeated permission produces a repeated entry.
    """
    return Manifest(
        name=name,
        description=defaults.description,
        authors=list(defaults.authors),
        homepage=defaults.homepage,
        tags=list(defaults.tags),
        version=defaults.version,
        license=defaults.license,
        permissions=[{"type": Permission(p).value} for p in permissions],
    )


def render_manifest(
    name: str,
    permissions: Iterable[Permission],
    defaults: ManifestDefaults = DEFAULT_MANIFEST,
) -> str:
    return build_manifest(name, permissions, defaults).to_json()
