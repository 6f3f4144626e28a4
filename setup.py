from setuptools import setup, find_packages

setup(
    name="twitter-archive-codec",
    version="0.1",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "orjson",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
