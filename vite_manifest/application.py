import logging
from configparser import ConfigParser
from typing import Union

from vite_manifest.dependency_injection.config import config_as_dict, get_config
from vite_manifest.dependency_injection.container import Container
from vite_manifest.services.template_service import TemplateService

log = logging.getLogger(__name__)


def create_template_service(
    config: Union[ConfigParser, None] = None, container: Union[Container, None] = None
) -> TemplateService:
    container = container if container is not None else Container()
    _config: ConfigParser = config if config is not None else get_config()
    loglevel_name = _config.get("app", "loglevel", fallback="info").upper()
    loglevel = logging.getLevelName(loglevel_name)

    if isinstance(loglevel, str):
        raise ValueError(f"Invalid loglevel {loglevel_name}")
    logging.basicConfig(
        level=loglevel,
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    container.config.from_dict(config_as_dict(_config))

    vite_config = container.services.vite_config()
    if vite_config.dev_enabled:
        log.info("Serving vite assets from dev server %s", vite_config.server_url)
    else:
        log.info("Serving vite assets from manifest %s", vite_config.manifest_path)

    return container.services.template_service()
