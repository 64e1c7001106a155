""" dlcoracle build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import dlcoracle

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=dlcoracle.name,
    version=dlcoracle.__version__,
    license=dlcoracle.__license__,
    author=dlcoracle.__author__,
    author_email=dlcoracle.__author_email__,
    description="Oracle signatures for Discreet Log Contracts on secp256k1",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["btclib>=2023.7.12,<2026"],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    keywords=(
        "bitcoin cryptography elliptic-curves secp256k1 schnorr "
        "discreet-log-contracts dlc oracle adaptor-signatures"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
