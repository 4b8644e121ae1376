import abc
from typing import List, Sequence


class ViteManifestInterface(abc.ABC):
    @abc.abstractmethod
    def render_scripts(self, entries: Sequence[str]) -> str:
        pass

    @abc.abstractmethod
    def render_styles(self, entries: Sequence[str]) -> str:
        pass

    @abc.abstractmethod
    def render_preloads(self, entries: Sequence[str]) -> str:
        pass

    @abc.abstractmethod
    def get_scripts(self, entries: Sequence[str]) -> List[str]:
        pass

    @abc.abstractmethod
    def get_styles(self, entries: Sequence[str]) -> List[str]:
        pass

    @abc.abstractmethod
    def get_imports(self, entries: Sequence[str]) -> List[str]:
        pass

    @abc.abstractmethod
    def get_asset_url(self, entry: str) -> str:
        pass
