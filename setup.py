from setuptools import find_packages, setup


setup(
    name="jsclean",
    version="1.0.0",
    description="Limpiador de JavaScript: elimina comentarios y llamadas a console sin romper strings ni regex",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["jsclean", "jsclean.*"]),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["jsclean = jsclean.cli:main"]},
)
