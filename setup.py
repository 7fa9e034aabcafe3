from setuptools import setup

setup(
    name="genfloat",
    version="0.1.0",  # Match genfloat.version
    description="Generic single/double precision float capabilities for numeric code",
    packages=["genfloat"],
    package_data={"genfloat": ["py.typed"]},
    install_requires=["numpy>=1.22"],
    extras_require={"test": ["pytest>=7", "hypothesis>=6"]},
    zip_safe=False,
    python_requires=">=3.9",
)
