# to build run : python3 setup.py sdist bdist_wheel
import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geoplotter",
    version="1.0.0", # CHANGE HERE
    author="GeoPlotter's core developers",
    description="Parsing, geometric factors, Karous-Hjelt filter and profile plots for VLF and resistivity surveys",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={'': 'src'},
    packages=setuptools.find_packages('src'),
    install_requires=['numpy','matplotlib','pandas','chardet'],
    extras_require={'test': ['pytest>=7']},
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
    ],
)
