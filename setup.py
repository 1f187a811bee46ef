from setuptools import setup, find_packages

def parse_requirements(requirements):
    with open(requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]

requirements = parse_requirements("requirements.txt")

setup(
    name='opensearch-security-client',
    version='0.1.0',
    description='Async client binding for the OpenSearch security role mapping API',
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    entry_points={
        "console_scripts": [
            "opensearch-rolesmapping=opensearch_security_client.cli:cli",
        ],
    }
)
