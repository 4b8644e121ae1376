from setuptools import setup, find_namespace_packages

__version__ = "1.0.0"

requirements = [
    "fastapi",
    "dependency-injector>=4.0,<5.0",
    "jinja2",
    "markupsafe",
    "pydantic>=2.0,<3.0",
]

setup(
    name="vite-manifest",
    version=__version__,
    packages=find_namespace_packages(include=["vite_manifest", "vite_manifest.*"]),
    package_dir={"vite_manifest": "vite_manifest"},
    install_requires=requirements,
    extras_require={
        "dev": [
            "black",
            "pylint",
            "bandit",
            "mypy",
            "autoflake",
            "coverage",
            "coverage-badge",
            "pytest",
            "pytest-mock",
        ]
    },
)
