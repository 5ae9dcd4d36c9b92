from setuptools import setup, find_packages

setup(
    name="ccc",
    version="1.0.0",
    packages=find_packages(include=["ccc", "ccc.*"]),
    install_requires=[
        "click>=8.1.0", "rich>=13.0.0",
    ],
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["ccc=ccc.main:main"]},
    python_requires=">=3.10",
)
