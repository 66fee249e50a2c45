from setuptools import setup, find_packages

setup(
    name="simplink-routing",
    version="0.1.0",
    description="Trip planning over the fixed BSD Link bus network, with OSRM/OpenStreetMap decoration.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main_cli"],
    install_requires=[
        "requests",
        "pytz",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
)
