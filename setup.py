"""
Setup file.
"""

from setuptools import find_packages, setup

KEYWORDS = "solidity solc ethereum compiler linker contracts bytecode abi"


if __name__ == "__main__":
    setup(
        name="solbuild",
        version="0.1.0",
        description="Compile and link Solidity contracts by driving solc",
        keywords=KEYWORDS,
        python_requires=">=3.8",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=["pycryptodome"],
        extras_require={"test": ["pytest"]},
        entry_points={"console_scripts": ["solbuild=solbuild.cli:main"]},
        include_package_data=True)
