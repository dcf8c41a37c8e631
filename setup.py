import setuptools
import sys

sys.path.append("./src/")

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

import lines_lossy

setuptools.setup(
    name="lines-lossy",
    version=lines_lossy.__version__,
    author="Alexander Chzhen",
    author_email="survtur@ya.ru",
    description="Iterate lines of a byte stream, replacing invalid UTF-8 instead of failing",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Operating System :: OS Independent",
    ],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    package_data={"": ['*.ini']},
    package_dir={"": "src"},
    packages=setuptools.find_namespace_packages(where="src", include=["lines_lossy", "lines_lossy.*"]),
    python_requires=">=3.8",
)
