import pathlib
from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent
README = (HERE / "README.md").read_text()

setup(
    name="occupancyabc",
    version="0.1.0",
    description="Approximate Bayesian Computation for colonization and extinction of a site",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Patrick Laub and Pierre-Olivier Goffard",
    author_email="patrick.laub@gmail.com",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Intended Audience :: Science/Research",
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=["joblib", "numba", "numpy>=1.17", "scipy>=1.4", "tqdm"],
    extras_require={"test": ["pytest"]},
)
