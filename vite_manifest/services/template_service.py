from typing import Any, Callable, Dict, Optional

from markupsafe import Markup

from fastapi.templating import Jinja2Templates

from vite_manifest.services.vite_manifest_interface import ViteManifestInterface


def _as_markup(render: Callable[[list], str]) -> Callable[..., Markup]:
    def render_entries(*entries: str) -> Markup:
        return Markup(render(list(entries)))

    return render_entries


class TemplateService:
    def __init__(
        self,
        jinja_template_directory: str,
        vite_manifest_service: Optional[ViteManifestInterface] = None,
        header_template: Optional[str] = None,
        sidebar_template: Optional[str] = None,
    ):
        self.vite_manifest_service = vite_manifest_service

        self._templates = Jinja2Templates(directory=jinja_template_directory)

        if self.vite_manifest_service is not None:
            self._register_vite_functions(self.vite_manifest_service)

        if header_template is not None and len(header_template) > 0:
            self._templates.env.globals["header"] = header_template

        if sidebar_template is not None and len(sidebar_template) > 0:
            self._templates.env.globals["sidebar"] = sidebar_template

    @property
    def templates(self) -> Jinja2Templates:
        return self._templates

    def render(
        self, template_name: str, context: Optional[Dict[str, Any]] = None
    ) -> str:
        template = self._templates.get_template(template_name)
        return template.render(context or {})

    def render_string(
        self, source: str, context: Optional[Dict[str, Any]] = None
    ) -> str:
        template = self._templates.env.from_string(source)
        return template.render(context or {})

    def _register_vite_functions(self, service: ViteManifestInterface) -> None:
        template_globals = self._templates.env.globals
        template_globals["vite_js"] = _as_markup(service.render_scripts)
        template_globals["vite_css"] = _as_markup(service.render_styles)
        template_globals["vite_preload"] = _as_markup(service.render_preloads)

        template_globals["vite_asset"] = service.get_asset_url
