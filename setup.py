from setuptools import setup, find_packages

setup(
    name="hierarchy-sort",
    version="0.1.0",
    description="Sort parent-linked items into hierarchical display order.",
    python_requires=">=3.8",
    # Packages live in tools/lib
    package_dir={
        "": "tools/lib",
    },
    packages=find_packages(where="tools/lib", exclude=["*.tests"]),
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "hierarchy-sort=hierarchy_sort.cli:main",
        ],
    },
)
