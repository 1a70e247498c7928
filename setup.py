# setup.py
from setuptools import setup, find_packages

setup(
    name='solrcount',
    version='1.0.2',
    packages=find_packages(include=['solrcount', 'solrcount.*']),
    install_requires=[
        "pydantic>=2",
        "fastapi",
        "uvicorn",
        "httpx",
    ],
    extras_require={
        'test': [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'solrcount=solrcount.cli:main',
        ],
    },
    description='A proxy for Solr that only reveals the number of results.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
)
