from os import path
from typing import Iterable, List, Union


def file_content(filepath: str) -> Union[str, None]:
    if filepath is not None and path.isfile(filepath):
        with open(filepath, "r", encoding="utf-8") as file:
            return file.read()
    return None


def as_bool(input_str: Union[str, bool, None]) -> bool:
    if isinstance(input_str, bool):
        return input_str
    return input_str is not None and input_str.lower() == "true"


def unique(items: Iterable[str]) -> List[str]:
    """
    Drop duplicates, keeping the first occurrence of every item in place.
    """
    return list(dict.fromkeys(items))
