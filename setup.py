"""Setup script for the epcis-doc package."""
from setuptools import setup, find_packages

setup(
    name="epcis-doc",
    version="0.1.0",
    description="Build, serialize and validate EPCIS 2.0 JSON documents",
    packages=find_packages(include=["epcis_doc", "epcis_doc.*"]),
    package_data={
        "epcis_doc.schema": ["schemas/*.json"],
        "epcis_doc.tests": ["data/*.json"],
    },
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.5.2",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
        "python-json-logger>=3.1.0",
        "jsonschema>=4.18.0",
        "referencing>=0.28.0",
        "rfc3339-validator>=0.1.4",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.3",
        ],
    },
    entry_points={
        "console_scripts": [
            "epcis-doc=epcis_doc.main:main",
        ],
    },
)
