# setup.py
from setuptools import setup, find_packages

setup(
    name="user-directory-api",
    version="0.1.0",
    packages=find_packages(include=['api', 'api.*', 'config', 'src', 'src.*', 'frontend', 'frontend.*']),
    py_modules=['run_server', 'run_dashboard'],
    install_requires=[
        'fastapi>=0.100.0',
        'uvicorn>=0.15.0',
        'python-dotenv>=0.19.0',
        'pydantic>=2.0.0',
        'pydantic-settings>=2.0.0',
        'python-json-logger>=3.1.0',
        'requests>=2.26.0',
        'customtkinter>=5.2.0',
    ],
    extras_require={
        'test': [
            'pytest>=8.2.0',
            'httpx>=0.24.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'user-directory-api=run_server:main',
        ],
    },
    python_requires='>=3.8',
    package_dir={"": "."},
    include_package_data=True,
)
