# setup.py
from setuptools import setup, find_packages

setup(
    name="objweld",
    version="1.0.0",
    description="Wavefront OBJ loader producing welded, indexed triangle meshes",
    packages=find_packages(include=["objweld", "objweld.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["objweld=objweld.__main__:main"],
    },
)
