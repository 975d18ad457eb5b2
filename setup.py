import re

from setuptools import find_packages, setup

with open("src/picopubkey/__about__.py") as f:
    version = re.search(r'__version__ = "([^"]+)"', f.read()).group(1)

if __name__ == "__main__":
    setup(
        name="picopubkey",
        version=version,
        description="Picopubkey Cosmos public key encodings (amino, bech32)",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=["bech32>=1.2.0"],
        extras_require={"test": ["pytest", "hypothesis"]},
    )
