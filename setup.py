from setuptools import find_packages, setup

setup(
    name="unicode_ranges",
    version="0.1.0",
    description="UTF-16 code unit arithmetic and Unicode block/script classification",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "unicode_ranges.classify": ["*.txt"],
    },
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "regex",
        "tabulate",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "unicode-ranges=unicode_ranges.describe:main",
        ],
    },
)
