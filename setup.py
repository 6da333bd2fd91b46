from setuptools import setup, find_packages

import pathlib
import re
HERE = pathlib.Path(__file__).parent

VERSION = re.search(r"__version__ = '([^']+)'", (HERE / "pyrehash" / "version.py").read_text()).group(1)
README = (HERE / "README.md").read_text()


setup(
    name="pyrehash",
    version=VERSION,
    python_requires='>=3.7',
    description="Deterministic rehash of arbitrary seeds to NIST P-256 public keys",
    long_description=README,
    long_description_content_type="text/markdown",
    author="rage-proof",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
    ],
    include_package_data=True,
    packages=find_packages(exclude=["tests"]),
    install_requires=['chacha20poly1305==0.0.3', 'cryptography>=2.5'],
    extras_require={'test': ['pytest']},
)
