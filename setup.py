from setuptools import find_packages, setup

setup(
    name="kperms",
    version="0.1.0",
    packages=find_packages(),
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
)
