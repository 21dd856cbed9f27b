import os

from setuptools import setup

ext_modules = []
if os.environ.get("QUADINT_COMPILE") == "1":
    from mypyc.build import mypycify

    # __init__.py stays pure Python, it only re-exports the compiled modules
    ext_modules = mypycify([
        "quadint/errors.py",
        "quadint/fmt.py",
        "quadint/parse.py",
        "quadint/quad.py",
        "quadint/quartic.py",
        "quadint/ring.py",
        "quadint/utils.py",
    ])

setup(
    name="quadint",
    version="0.1.0",
    packages=["quadint"],
    python_requires=">=3.9",
    install_requires=["sympy"],
    extras_require={
        "test": ["pytest"],
        "compile": ["mypy"],
    },

    ext_modules=ext_modules,

    license="MIT",
)
