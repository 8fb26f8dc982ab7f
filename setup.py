from setuptools import setup, find_packages

setup(
    name="igor",
    version="2.4.0",
    description="Command line tooling for GitHub organization administration.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["igor", "igor.*"]),
    python_requires=">=3.10",
    install_requires=[
        "aiohttp",
        "prompt_toolkit",
        "pydantic>=2",
        "python-json-logger>=3.1",
        "pyyaml",
        "rich",
        "toml",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "igor = igor.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Environment :: Console",
    ],
)
