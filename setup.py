from setuptools import find_packages, setup

with open("README.md", "r") as readme:
    long_description = readme.read()

setup(
    name="mailchimp_python_api",
    version="0.1.0",
    description="Typed python client for the Mailchimp Marketing API v3.0.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
    ],
    license="GPLv3",
    keywords=[
        "mailchimp",
        "email",
        "marketing",
        "newsletter",
        "python",
        "api",
    ],
    python_requires=">=3.9",
    install_requires=[
        "requests >= 2.32.3",
        "loguru >= 0.7.3",
        "pydantic >= 2.0",  # Wire schemas and query parameters in datatypes.py
        "click >= 8.0",  # For the CLI
        "beartype >= 0.20.2",  # Runtime type checking of the public client methods
    ],
    extras_require={
        "dev": [
            "pytest >= 8.3.4",
            "build >= 1.2.2.post1",
            "twine >= 6.1.0",
            "bumpver >= 2024.1130",
        ],
    },
    entry_points={
        "console_scripts": [
            "mailchimp=mailchimp_python_api.__main__:cli",
        ],
    },
)
