from setuptools import setup

setup(
    name="minmaxheap",
    version="0.1.0",
    description="Array-backed min-max heap with O(log n) access to both extremes",
    packages=["minmaxheap"],
    py_modules=["ui", "stress"],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "sortedcontainers",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
