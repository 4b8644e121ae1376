import logging
from typing import List, Optional, Sequence, Set, Union

from vite_manifest.exceptions.vite_exceptions import (
    EntrypointNotFoundException,
    ViteManifestException,
)
from vite_manifest.misc.tags import render_preload, render_script, render_stylesheet
from vite_manifest.misc.utils import unique
from vite_manifest.models.chunk import Chunk, Manifest
from vite_manifest.models.vite_config import ViteConfig
from vite_manifest.services.manifest_loader import ManifestLoader
from vite_manifest.services.vite_manifest_interface import ViteManifestInterface

log = logging.getLogger(__name__)

VITE_CLIENT = "@vite/client"

STYLESHEET_EXTENSIONS = (
    ".css",
    ".scss",
    ".sass",
    ".less",
    ".styl",
    ".stylus",
    ".pcss",
    ".postcss",
)


class ViteManifestService(ViteManifestInterface):
    """
    Resolves Vite entry points to the files a page has to load.

    In production the files come from the manifest written by ``vite build``.
    With the dev server enabled the manifest is never read, the entries are
    served by the dev server itself.
    See: https://vitejs.dev/guide/backend-integration
    """

    def __init__(
        self,
        vite_config: ViteConfig,
        manifest_loader: Optional[ManifestLoader] = None,
    ):
        self._vite_config = vite_config
        self._manifest_loader = (
            manifest_loader
            if manifest_loader is not None
            else ManifestLoader(vite_config.manifest_path)
        )
        if (
            not vite_config.dev_enabled
            and not self._manifest_loader.manifest_path
            and not self._manifest_loader.is_loaded
        ):
            log.warning("No vite manifest path configured and dev server disabled")

    @property
    def vite_config(self) -> ViteConfig:
        return self._vite_config

    def get_manifest(self) -> Manifest:
        return self._manifest_loader.load()

    def render_scripts(self, entries: Sequence[str]) -> str:
        return "".join(render_script(file) for file in self.get_scripts(entries))

    def render_styles(self, entries: Sequence[str]) -> str:
        return "".join(render_stylesheet(file) for file in self.get_styles(entries))

    def render_preloads(self, entries: Sequence[str]) -> str:
        return "".join(render_preload(file) for file in self.get_imports(entries))

    def get_scripts(self, entries: Sequence[str]) -> List[str]:
        entries = _as_list(entries)
        if self._use_server():
            return self._prefix_files(unique([VITE_CLIENT, *entries]))

        if not entries:
            return []

        manifest = self.get_manifest()
        files: List[str] = []
        for entry in entries:
            files.extend(self._get_script(self._get_entrypoint(entry, manifest)))
        return self._prefix_files(unique(files))

    def get_styles(self, entries: Sequence[str]) -> List[str]:
        """
        With the dev server enabled only standalone stylesheet entries are
        returned, styles imported from scripts are injected by the dev server.
        """
        entries = _as_list(entries)
        if self._use_server():
            return self._prefix_files(
                unique(
                    entry
                    for entry in entries
                    if entry.lower().endswith(STYLESHEET_EXTENSIONS)
                )
            )

        if not entries:
            return []

        manifest = self.get_manifest()
        files: List[str] = []
        visited: Set[str] = set()
        for entry in entries:
            chunk = self._get_entrypoint(entry, manifest)
            visited.add(entry)
            files.extend(self._get_style(chunk, manifest, visited))
        return self._prefix_files(unique(files))

    def get_imports(self, entries: Sequence[str]) -> List[str]:
        entries = _as_list(entries)
        if self._use_server():
            return []

        if not entries:
            return []

        manifest = self.get_manifest()
        files: List[str] = []
        for entry in entries:
            chunk = self._get_entrypoint(entry, manifest)
            for import_name in chunk.imports or []:
                imported = self._find_chunk(import_name, manifest)
                if imported is None:
                    log.debug(
                        "Import %s of %s not found in manifest, skipping",
                        import_name,
                        entry,
                    )
                    continue
                files.extend(self._get_script(imported))
        return self._prefix_files(unique(files))

    def get_asset_url(self, entry: str) -> str:
        if self._use_server():
            return self._prefix_file(entry)

        chunk = self._get_entrypoint(entry, self.get_manifest())
        if chunk.file is None:
            raise ViteManifestException(f"Entry `{entry}` has no output file")
        return self._prefix_file(chunk.file)

    @staticmethod
    def _get_script(chunk: Chunk) -> List[str]:
        if chunk.file is None:
            return []
        return [chunk.file]

    def _get_style(
        self, chunk: Chunk, manifest: Manifest, visited: Set[str]
    ) -> List[str]:
        files: List[str] = []

        # standalone stylesheet entry
        if chunk.file is not None and chunk.file.endswith(".css"):
            files.append(chunk.file)

        # a css list replaces the standalone file, even when empty
        if chunk.css is not None:
            files = list(chunk.css)

        for import_name in chunk.imports or []:
            if import_name in visited:
                continue
            visited.add(import_name)
            imported = self._find_chunk(import_name, manifest)
            if imported is None:
                log.debug("Import %s not found in manifest, skipping", import_name)
                continue
            files.extend(self._get_style(imported, manifest, visited))

        return files

    @staticmethod
    def _get_entrypoint(entry: str, manifest: Manifest) -> Chunk:
        if entry not in manifest:
            raise EntrypointNotFoundException(entry)
        return manifest[entry]

    @staticmethod
    def _find_chunk(name: str, manifest: Manifest) -> Union[Chunk, None]:
        if name not in manifest:
            return None
        return manifest[name]

    def _prefix_file(self, file_name: str) -> str:
        if self._use_server():
            return f"{self._vite_config.server_url}{file_name}"
        return f"{self._vite_config.base_path}{file_name}"

    def _prefix_files(self, files: List[str]) -> List[str]:
        return [self._prefix_file(file) for file in files]

    def _use_server(self) -> bool:
        return self._vite_config.dev_enabled


def _as_list(entries: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(entries, str):
        return [entries]
    return list(entries)
