from setuptools import setup, find_packages
import re

# Read version from wagecalc/__init__.py
with open('wagecalc/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='wagecalc',
    version=version,
    packages=find_packages(include=['wagecalc', 'wagecalc.*']),
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
            'wage-calc=wagecalc.cli.__main__:main',
            'wage-calc-mcp=wagecalc.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Hourly wage projection comparing two contract raise schedules.',
    python_requires='>=3.10',
)
