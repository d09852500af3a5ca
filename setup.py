from setuptools import setup, find_packages

setup(
    name="modregistry",
    version="0.1.0",
    description="Registry of loaded mods: lookup, code attribution and incompatibility checks",
    packages=find_packages(include=["modregistry", "modregistry.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "python-dotenv",
        "colorama",
        "click",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "modregistry=modregistry.cli.cli:main",
        ],
    },
)
