# Always prefer setuptools over distutils
from os import path
from setuptools import setup, find_packages
from io import open

here = path.abspath(path.dirname(__file__))


# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='okxapi',  # Required
    version='0.1.0',  # Required
    description='Async client for the OKX exchange REST API (v3 and v5)',  # Optional
    long_description=long_description,  # Optional
    long_description_content_type='text/markdown',  # Optional
    author='maximaus',  # Optional
    # For a list of valid classifiers, see https://pypi.org/classifiers/
    classifiers=[  # Optional
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Office/Business :: Financial',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
    package_dir={'': 'src'},  # Optional
    packages=find_packages(where='src'),  # Required
    python_requires='>=3.8, <4',
    install_requires=[
        'click>=7',
        'httpx>=0.23, <1',
        'pydantic>=2, <3',
        'python-dotenv>=0.19',
        'stackprinter>=0.2',
        'structlog>=20',
        'typing_extensions>=4',
        'ujson>=4',
    ],
    extras_require={
        'test': [
            'pytest>=7',
            'pytest-asyncio>=0.21',
        ],
    },
    entry_points={  # Optional
        'console_scripts': [
            'okxapi-time=okxapi.cli:server_time',
            'okxapi-call=okxapi.cli:call_endpoint',
        ],
    },
)
