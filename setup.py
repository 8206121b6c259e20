from setuptools import find_packages, setup

setup(
    name="flagparser",
    version="0.1.0",
    description="Low-level command line argument grammar engine.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "pydantic>=2",
        "python-json-logger>=3.1",
        "pyyaml",
        "toml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
