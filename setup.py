from setuptools import setup

with open("hubspace/version.py") as f:
    exec(f.read())

setup(
    name="python-hubspace",
    version=__version__,  # type: ignore # noqa: F821
    description="Python API for exposing Hubspace lights as host characteristics",
    url="https://github.com/python-hubspace/python-hubspace",
    author="",
    author_email="",
    license="GPLv3",
    packages=["hubspace", "hubspace.cli"],
    install_requires=["aiohttp", "asyncclick>=8.1.7", "mashumaro", "yarl"],
    extras_require={
        "speedups": ["orjson"],
        "shell": ["rich"],
        "test": ["pytest", "pytest-asyncio", "pytest-mock"],
    },
    python_requires=">=3.11",
    entry_points={"console_scripts": ["hubspace=hubspace.cli.main:cli"]},
    zip_safe=False,
)
