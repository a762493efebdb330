# setup.py

import setuptools
from setuptools import setup, find_packages

if __name__ == "__main__":
    setup(
        name='jive',
        version='0.1.0',  # Ensure consistency with jive/__init__.py
        description='Collection-style operations over JSON node trees',
        packages=find_packages(include=["jive", "jive.*"]),  # Restrict to jive and its subpackages
        include_package_data=True,
        python_requires='>=3.8',
        install_requires=[
            "lark>=1.1",
        ],
        extras_require={
            "test": ["pytest"],
        },
    )
