from setuptools import setup, find_packages

setup(
    name="jenaRecon",
    version="0.1.0",
    description="Full-text reconciliation queries against Jena Text SPARQL endpoints",
    packages=find_packages(include=["jenaRecon", "jenaRecon.*"]),
    install_requires=[
        "click>=8.0",
        "requests>=2.31.0",
        "rdflib>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "requests-mock>=1.11",
            "pytest-socket>=0.6",
        ],
    },
    entry_points={
        "console_scripts": ["jenaRecon=jenaRecon.cli:main"],
    },
    license="MIT",
)
