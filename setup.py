from setuptools import setup, find_packages

setup(
    name='condonery',
    version='1.0.0',
    description='Command-line manager for property listings and interested clients',
    packages=find_packages(include=['condonery', 'condonery.*']),
    install_requires=[
        'typer>=0.9',
        'rich>=13.0',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'condonery = condonery.app:main',
        ],
    },
    python_requires='>=3.8',
)
