# setup.py
from setuptools import setup, find_packages

setup(
    name="kedia",
    version="0.1.0",
    description="Parse quick free-text expense notes into amount, category and date",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"kedia": ["data/*.yaml"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "python-dotenv>=0.19",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "kedia=kedia.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
