from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="xhsign",
    version="0.4.0",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "pycryptodome>=3.19.0",
        "numpy>=1.24.0",
    ],
    python_requires=">=3.10",
    entry_points={"console_scripts": ["xhsign=xhsign.main:main"]},
    description="Request signature toolkit for the Xiaohongshu web API",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
