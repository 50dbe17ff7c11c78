from setuptools import setup, find_packages

setup(
    name="modreports",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*", "alembic", "alembic.*"]),
    python_requires=">=3.11",
    install_requires=[
        "sqlalchemy>=2.0",
        "psycopg2-binary",
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
        "alembic",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
