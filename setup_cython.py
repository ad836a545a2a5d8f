"""Build script for the optional Cython-compiled trie engine.

Usage:
    pip install .[speedups]
    python setup_cython.py build_ext --inplace

This compiles masktrie/node.py and masktrie/trie.py into shared-object
(.so / .pyd) files that Python imports ahead of the pure-Python sources.
Delete the generated files to go back to the interpreted modules. The
modules are untyped Python, so this is only an optional interpreter speed-up.
"""

from setuptools import setup, Extension
from Cython.Build import cythonize

extensions = [
    Extension(
        "masktrie.node",
        ["masktrie/node.py"],
    ),
    Extension(
        "masktrie.trie",
        ["masktrie/trie.py"],
    ),
]

setup(
    name="masktrie-cython",
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
        },
    ),
)
