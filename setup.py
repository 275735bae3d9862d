# setup.py
from setuptools import setup, find_packages

setup(
    name="sheq",
    version="0.1.0",
    description="Tree-walking evaluator for the SHEQ expression language",
    packages=find_packages(include=["sheq", "sheq.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
