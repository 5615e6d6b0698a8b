from setuptools import find_packages
from setuptools import setup

with open("requirements.txt") as f:
    reqs = [line for line in f.read().split("\n") if line]

with open("requirements_dev.txt") as f:
    reqs_dev = [line for line in f.read().split("\n") if line]

setup(
    name="qasm2stim",
    version="0.1",
    packages=find_packages(include=["qasm2stim", "qasm2stim.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=reqs,
    extras_require={"dev": reqs_dev},
    entry_points={"console_scripts": ["qasm2stim=qasm2stim.cli:main"]},
)
