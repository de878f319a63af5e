"""Set-up file for hpolytope for installations using ``pip install .``"""
from setuptools import find_packages, setup


with open("requirements.txt") as f:
    required = f.read().splitlines()


setup(
    name="hpolytope",
    version="0.1.0",
    license="GPL",
    keywords=["convex polyhedra half spaces vertex enumeration safe corridor"],
    install_requires=required,
    extras_require={"testing": ["pytest"]},
    python_requires=">=3.10",
    description=(
        "Interior points, overlap tests and vertex enumeration for convex polyhedra "
        "given as intersections of half spaces"
    ),
    platforms=["Linux", "Windows", "Mac OS-X"],
    package_data={
        "hpolytope": ["py.typed"],
    },
    packages=find_packages("src"),
    package_dir={"": "src"},
    zip_safe=False,
)
