from setuptools import setup, find_packages

setup(
    name="eventiter",  # Package name
    version="0.1.0",  # Version number
    author="eventiter contributors",
    description="Consume callback-driven event sources with async for.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dotenv",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
