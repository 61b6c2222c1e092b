from setuptools import setup, find_packages

setup(
    name="LongSim",
    version="0.1.0",
    packages=find_packages(include=["longsim", "longsim.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
        "scipy",
        "scikit-learn"
    ],
    extras_require={
        "parallel": ["joblib>=1.3"],
        "progress": ["tqdm"],
        "test": ["pytest", "joblib>=1.3", "tqdm"],
    },
    python_requires=">=3.9",
    description="Synthetic longitudinal data for statistical graphics tutorials",
)
