# setup.py
from setuptools import setup, find_packages

setup(
    name="raymath",
    version="1.0.0",
    description="3D math for rasterizers and ray tracers: vectors, Mat4, quaternions, rays",
    packages=find_packages(include=["raymath", "raymath.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
