from typing import Union


class ViteManifestException(Exception):
    def __init__(self, message: str, log_message: Union[str, None] = None):
        super().__init__(message if log_message is None else log_message)
        self.message = message
        self.log_message = log_message


class ManifestNotFoundException(ViteManifestException):
    def __init__(self, manifest_path: str):
        super().__init__(f"Manifest `{manifest_path}` not found.")
        self.manifest_path = manifest_path


class ManifestParseException(ViteManifestException):
    def __init__(self, reason: str, manifest_path: Union[str, None] = None):
        super().__init__(
            "Manifest could not be parsed: " + reason
            if manifest_path is None
            else f"Manifest `{manifest_path}` could not be parsed: {reason}",
        )
        self.manifest_path = manifest_path
        self.reason = reason


class EntrypointNotFoundException(ViteManifestException):
    def __init__(self, entry: str):
        super().__init__(f"Entry `{entry}` not found in manifest")
        self.entry = entry
