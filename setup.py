from setuptools import setup, find_packages

from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

# use the in house version number so we stay in synch with ourselves.
from cinterceptor.version import cinterceptor_version

setup(
    name='cinterceptor',
    version=cinterceptor_version,
    description='Compile Interceptor: inject compiler arguments into Unity builds',
    long_description=long_description,

    include_package_data=True,

    packages=find_packages(exclude=['test']),

    entry_points = {
        'console_scripts': [
            'cinterceptor = cinterceptor.interceptor:main',
            'cinterceptor-sanity-checker = cinterceptor.checker:main',
        ],
    },

    license='MIT',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Natural Language :: English',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Compilers',
        'Topic :: Software Development :: Build Tools',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
