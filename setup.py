import re

from setuptools import setup, find_packages


def version():
    return re.sub(r'[\s\'"\n]', '', open("ptmpy/version.py").readline().split("=")[1])


required = []
with open('requirements.txt') as f:
    required = f.read().splitlines()


setup(
    name='ptmpy',
    version=version(),
    description="Chemical modifications of peptides and proteins for mass spectrometry proteomics",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=required,
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    zip_safe=False,
    package_data={
        'ptmpy.structure.modification': ["data/*.json"],
    },
    python_requires=">=3.9",
)
