import os
from configparser import ConfigParser

import pytest

from vite_manifest.dependency_injection.config import config_as_dict, get_config
from vite_manifest.models.vite_config import ViteConfig

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
MANIFESTS_DIR = os.path.join(TESTS_DIR, "resources", "manifests")
TEMPLATES_DIR = os.path.join(TESTS_DIR, "resources", "templates")


@pytest.fixture
def manifests_dir() -> str:
    return MANIFESTS_DIR


@pytest.fixture
def manifest_path(manifests_dir) -> str:
    return os.path.join(manifests_dir, "manifest.json")


@pytest.fixture
def graph_manifest_path(manifests_dir) -> str:
    return os.path.join(manifests_dir, "graph_manifest.json")


@pytest.fixture
def templates_path() -> str:
    return TEMPLATES_DIR


@pytest.fixture
def vite_config(manifest_path) -> ViteConfig:
    return ViteConfig(manifest_path=manifest_path)


@pytest.fixture
def config(manifest_path, templates_path) -> ConfigParser:
    parser = ConfigParser()
    parser.read_dict(
        config_as_dict(get_config(os.path.join(TESTS_DIR, "vite.test.conf")))
    )
    parser.set("vite", "manifest_path", manifest_path)
    parser.set("templates", "jinja_path", templates_path)
    return parser
