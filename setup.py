from setuptools import setup, find_packages

setup(
    name='tokenledger',
    version='0.0.1',
    python_requires='>=3.10',
    install_requires=[
        'numpy',
        'pandas',
        'pyyaml',
        'pytest',
        'consistent_df @ https://github.com/macxred/consistent_df/tarball/main'
    ],
    description=('Minimal persisted token ledger with minting, transfers, '
                 'and balance and supply queries.'),
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(include=['tokenledger', 'tokenledger.*']),
    extras_require={
        "dev": [
            "flake8",
            "bandit",
        ]
    }
)
