from setuptools import setup

setup(
    name="mst_forest",
    version='1.0',
    description='Weighted undirected graphs with incremental minimum spanning forest construction',
    packages=["mst_forest"],
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "numba",
        "scikit-learn",
    ],
    extras_require={
        "test": [
            "pytest",
            "scipy",
        ],
    },
)
