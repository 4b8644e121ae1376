import json
import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from vite_manifest.exceptions.vite_exceptions import (
    ManifestNotFoundException,
    ManifestParseException,
)
from vite_manifest.misc.utils import file_content
from vite_manifest.models.chunk import Manifest

log = logging.getLogger(__name__)


class ManifestLoader:
    """
    Reads the Vite manifest once and keeps the parsed result for the lifetime
    of the loader. A failed read is not remembered, the next call to
    ``load`` tries again.
    """

    def __init__(self, manifest_path: str = ""):
        self._manifest_path = manifest_path
        self._manifest: Union[Manifest, None] = None

    @classmethod
    def from_dict(
        cls, manifest: Dict[str, Any], manifest_path: str = ""
    ) -> "ManifestLoader":
        loader = cls(manifest_path)
        loader._manifest = _parse_manifest(manifest, manifest_path)
        return loader

    @property
    def manifest_path(self) -> str:
        return self._manifest_path

    @property
    def is_loaded(self) -> bool:
        return self._manifest is not None

    def load(self) -> Manifest:
        if self._manifest is not None:
            return self._manifest

        try:
            content = file_content(self._manifest_path)
        except UnicodeDecodeError as exception:
            raise ManifestParseException(
                str(exception), self._manifest_path
            ) from exception
        if content is None:
            raise ManifestNotFoundException(self._manifest_path)

        try:
            data = json.loads(content)
        except json.JSONDecodeError as exception:
            raise ManifestParseException(
                str(exception), self._manifest_path
            ) from exception

        manifest = _parse_manifest(data, self._manifest_path)
        log.info(
            "Loaded vite manifest %s with %d chunks",
            self._manifest_path,
            len(manifest),
        )
        self._manifest = manifest
        return manifest


def _parse_manifest(data: Any, manifest_path: str) -> Manifest:
    if not isinstance(data, dict):
        raise ManifestParseException(
            f"expected a JSON object, got {type(data).__name__}", manifest_path
        )
    try:
        return Manifest.model_validate(data)
    except ValidationError as exception:
        raise ManifestParseException(str(exception), manifest_path) from exception
