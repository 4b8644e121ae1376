from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError

from vite_manifest.exceptions.vite_exceptions import ManifestParseException


class Chunk(BaseModel):
    """
    A single record of the Vite manifest.

    Keys missing from the manifest stay ``None``, which is not the same as an
    empty list: a chunk with ``"css": []`` still replaces its own stylesheet
    output when styles are collected.
    See: https://vitejs.dev/guide/backend-integration
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    file: Optional[str] = None
    src: Optional[str] = None
    name: Optional[str] = None
    css: Optional[List[str]] = None
    imports: Optional[List[str]] = None
    dynamic_imports: Optional[List[str]] = Field(default=None, alias="dynamicImports")
    assets: Optional[List[str]] = None
    is_entry: Optional[bool] = Field(default=None, alias="isEntry")
    is_dynamic_entry: Optional[bool] = Field(default=None, alias="isDynamicEntry")


class Manifest(RootModel[Dict[str, Dict[str, Any]]]):
    """
    Chunk records are kept as read and only turned into a ``Chunk`` when
    looked up, a malformed record fails the lookups that reach it and
    nothing else.
    """

    model_config = ConfigDict(frozen=True)

    def __contains__(self, name: object) -> bool:
        return name in self.root

    def __getitem__(self, name: str) -> Chunk:
        try:
            return Chunk.model_validate(self.root[name])
        except ValidationError as exception:
            raise ManifestParseException(
                f"chunk `{name}` is malformed: {exception}"
            ) from exception

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)
