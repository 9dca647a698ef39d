from setuptools import setup

from app.__version__ import __version_string__

setup(
    name="binsize",
    version=__version_string__,
    description="Strongly-typed signed 64-bit byte sizes with checked and wrapping arithmetic",
    packages=["binsize", "binsize.exception", "binsize.helper", "binsize.util"],
    package_dir={"binsize": "app/binsize"},
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "rich>=13.0",
        "returns>=0.22",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    zip_safe=False,
)
