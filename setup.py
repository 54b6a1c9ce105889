'''Validation and parsing of content types in OPC packages.'''
from setuptools import setup

with open('README.md', encoding='utf-8') as f:
    setup(
        author='opctype contributors',
        description='Validate and parse content types of parts in Open Packaging Conventions '
        '(OOXML) packages.',
        entry_points={'console_scripts': ['opctype = opctype.commands:opctype']},
        extras_require={
            'dev': [
                'mypy',
                'mypy-extensions',
                'pylint',
                'rope',
                'types-PyYAML',
                'types-tabulate>=0.8.2',
            ],
            'testing': [
                'pytest',
                'pytest-cov',
                'pytest-mock',
            ]
        },
        install_requires=[
            'bascom',
            'click>=8.0.0',
            'platformdirs>=2.0.0',
            'PyYAML>=5.4.1',
            'tabulate>=0.8.9',
            'typing-extensions>=4.4.0',
        ],
        license='MIT',
        long_description=f.read(),
        long_description_content_type='text/markdown',
        name='opctype',
        packages=['opctype', 'opctype.commands'],
        python_requires='>=3.10',
        version='1.0.0')
