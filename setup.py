import os
from setuptools import setup, find_packages

with open(
    os.path.join(
        os.path.dirname(os.path.realpath(__file__)), "swiftstore", "requirements.txt"
    )
) as f:
    requirements = f.read().splitlines()

setup(
    name="swiftstore",
    version="0.1.0",
    description="Client library for listing the containers of an object storage account",
    packages=find_packages(include=["swiftstore", "swiftstore.*"]),
    package_data={"swiftstore": ["requirements.txt"]},
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sws = swiftstore.cli:sws",
        ],
    },
)
