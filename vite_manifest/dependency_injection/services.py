# pylint: disable=c-extension-no-member
from dependency_injector import containers, providers

from vite_manifest.misc.utils import as_bool
from vite_manifest.models.vite_config import ViteConfig
from vite_manifest.services.manifest_loader import ManifestLoader
from vite_manifest.services.template_service import TemplateService
from vite_manifest.services.vite_manifest_service import ViteManifestService


class Services(containers.DeclarativeContainer):
    config = providers.Configuration()

    vite_config = providers.Singleton(
        ViteConfig,
        manifest_path=config.vite.manifest_path,
        base_path=config.vite.base_path,
        server_url=config.vite.server_url,
        dev_enabled=config.vite.dev_enabled.as_(as_bool),
    )

    manifest_loader = providers.Singleton(
        ManifestLoader,
        manifest_path=config.vite.manifest_path.as_(lambda value: value or ""),
    )

    vite_manifest_service = providers.Singleton(
        ViteManifestService,
        vite_config=vite_config,
        manifest_loader=manifest_loader,
    )

    template_service = providers.Singleton(
        TemplateService,
        jinja_template_directory=config.templates.jinja_path,
        vite_manifest_service=vite_manifest_service,
        header_template=config.templates.header_template,
        sidebar_template=config.templates.sidebar_template,
    )
