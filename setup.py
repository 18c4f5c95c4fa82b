# setup.py
from setuptools import setup, find_packages

setup(
    name="swrast3d",
    version="1.0.0",
    description="SWRast3D – CPU software rasterizer with procedural materials",
    packages=find_packages(include=["swrast3d", "swrast3d.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "glfw>=2.5.0",
        "PyOpenGL>=3.1.5",
        "Pillow>=9.0.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
