from setuptools import setup, find_packages
import re

# Read version from nyctax/__init__.py
with open('nyctax/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='nyctax',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'nyctax': ['presets.yaml', 'tax_rules/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'nyc-tax=nyctax.cli.__main__:main',
            'nyc-tax-mcp=nyctax.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Federal, NY State and NYC income tax and household budget calculator.',
    python_requires='>=3.10',
)
