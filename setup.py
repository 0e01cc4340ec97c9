#!/usr/bin/env python3

from setuptools import setup, find_packages
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="matbatch",
        packages=find_packages(include=["matbatch", "matbatch.*"]),
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Batch selection and render-state editing of material assets",
        author="mirmik",
        author_email="mirmikns@yandex.ru",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["editor", "materials", "batch"],
        classifiers=[],
        install_requires=[
            "numpy",
            "PyQt6>=6.4",
        ],
        extras_require={
            "test": [
                "pytest",
            ],
        },
        zip_safe=False,
    )
