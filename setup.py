from importlib import import_module
from setuptools import setup

with open('README.rst') as f:
    readme = f.read()

setup(
    name='markelf',
    version=import_module('markelf').__version__,
    description='Mark the class and OS/ABI bytes of an ELF header in place',
    long_description=readme,
    long_description_content_type='text/x-rst',
    packages=['markelf'],
    include_package_data=True,
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: Public Domain',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: Software Development :: Build Tools',
    ],
    python_requires='>=3.7',
    entry_points={
        'console_scripts': [
            'markelf = markelf.cli:cli_main',
        ],
    },
)
