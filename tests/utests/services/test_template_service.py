from unittest.mock import MagicMock

import pytest

from vite_manifest.exceptions.vite_exceptions import EntrypointNotFoundException
from vite_manifest.models.vite_config import ViteConfig
from vite_manifest.services.template_service import TemplateService
from vite_manifest.services.vite_manifest_interface import ViteManifestInterface
from vite_manifest.services.vite_manifest_service import ViteManifestService


@pytest.fixture
def template_service(templates_path, manifest_path) -> TemplateService:
    return TemplateService(
        jinja_template_directory=templates_path,
        vite_manifest_service=ViteManifestService(
            ViteConfig(manifest_path=manifest_path)
        ),
    )


@pytest.fixture
def dev_template_service(templates_path) -> TemplateService:
    return TemplateService(
        jinja_template_directory=templates_path,
        vite_manifest_service=ViteManifestService(ViteConfig(dev_enabled=True)),
    )


def test_script_tags(template_service):
    assert (
        template_service.render_string("{{ vite_js('views/foo.js') }}")
        == '<script type="module" src="assets/foo-BRBmoGS9.js"></script>'
    )
    assert template_service.render_string(
        "{{ vite_js('views/foo.js', 'views/bar.js') }}"
    ) == (
        '<script type="module" src="assets/foo-BRBmoGS9.js"></script>'
        '<script type="module" src="assets/bar-gkvgaI9m.js"></script>'
    )


def test_link_tags(template_service):
    assert template_service.render_string("{{ vite_css('views/foo.js') }}") == (
        '<link rel="stylesheet" href="assets/foo-5UjPuW-k.css" />'
        '<link rel="stylesheet" href="assets/shared-ChJ_j-JJ.css" />'
    )
    assert (
        template_service.render_string("{{ vite_css('views/bar.js') }}")
        == '<link rel="stylesheet" href="assets/shared-ChJ_j-JJ.css" />'
    )


def test_preload_tags(template_service):
    assert (
        template_service.render_string("{{ vite_preload('views/foo.js') }}")
        == '<link rel="modulepreload" href="assets/shared-B7PI925R.js" />'
    )


def test_dev_server(dev_template_service):
    assert dev_template_service.render_string("{{ vite_js('views/bar.js') }}") == (
        '<script type="module" src="@vite/client"></script>'
        '<script type="module" src="views/bar.js"></script>'
    )
    assert dev_template_service.render_string("{{ vite_css('views/foo.js') }}") == ""
    assert (
        dev_template_service.render_string("{{ vite_preload('views/bar.js') }}") == ""
    )


def test_render_template_file(template_service):
    rendered = template_service.render("page.html", {"title": "<Logo>"})

    assert '<link rel="stylesheet" href="assets/foo-5UjPuW-k.css" />' in rendered
    assert '<link rel="modulepreload" href="assets/shared-B7PI925R.js" />' in rendered
    assert '<script type="module" src="assets/foo-BRBmoGS9.js"></script>' in rendered
    assert '<img src="assets/logo-C8pqGZ1d.png" alt="&lt;Logo&gt;">' in rendered


def test_missing_entry_aborts_rendering(template_service):
    with pytest.raises(EntrypointNotFoundException):
        template_service.render_string("{{ vite_js('views/notFound.js') }}")


def test_globals_use_interface():
    manifest_service = MagicMock(spec=ViteManifestInterface)
    manifest_service.render_scripts.return_value = "<script></script>"

    service = TemplateService(
        jinja_template_directory=".", vite_manifest_service=manifest_service
    )

    assert service.render_string("{{ vite_js('a.js', 'b.js') }}") == "<script></script>"
    manifest_service.render_scripts.assert_called_once_with(["a.js", "b.js"])
    manifest_service.get_asset_url.return_value = "/static/assets/logo.png"
    assert service.render_string("{{ vite_asset('images/logo.png') }}") == (
        "/static/assets/logo.png"
    )
    manifest_service.get_asset_url.assert_called_once_with("images/logo.png")


def test_without_vite_manifest_service():
    service = TemplateService(
        jinja_template_directory=".",
        header_template="header.html",
        sidebar_template="",
    )

    assert "vite_js" not in service.templates.env.globals
    assert service.templates.env.globals["header"] == "header.html"
    assert "sidebar" not in service.templates.env.globals
