from setuptools import setup, find_packages
import sys, os

version = '0.1'

def readme():
    dirname = os.path.dirname(os.path.abspath(__file__))
    filename = os.path.join(dirname, "README.txt")
    with open(filename) as fp:
        return fp.read()

setup(name='mimeparse',
    version=version,
    description="Mime-type parsing and HTTP Accept header matching",
    long_description=readme(),
    classifiers=[], # Get strings from http://pypi.python.org/pypi?%3Aaction=list_classifiers
    keywords='http accept mime-type content negotiation',
    author='',
    author_email='',
    url='',
    license='BSD',
    packages=find_packages(exclude=['ez_setup', 'examples', 'tests']),
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.7",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points="""
        [console_scripts]
        mimeparse=mimeparse.command:mimeparse
    """,
    )
