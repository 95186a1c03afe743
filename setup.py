# setup.py
from setuptools import setup, find_packages

setup(
    name="linsl",
    version="0.1.0",
    description="An interpreter for Linsl, a minimal lisp-like language",
    packages=find_packages(include=["linsl", "linsl.*", "linsl_lsp", "linsl_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.3,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "linsl=linsl.__main__:main",
            "linsl-ls=linsl_lsp.server:ls.start_io",
        ],
    },
    zip_safe=False,
)
