from setuptools import setup, find_packages

setup(
    name="assist-codegen",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"assist_codegen": ["templates/*.rs", "templates/*.md"]},
    description=(
        "Generates assist tests and documentation from assist description "
        "comments."
    ),
    install_requires=["jinja2>=2.11"],
    extras_require={"test": ["pytest", "marko", "mypy"]},
    entry_points={
        "console_scripts": [
            "assist-codegen=assist_codegen.scripts.assist_codegen:main",
        ],
    },
)
