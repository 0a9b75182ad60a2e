from setuptools import setup, find_packages


setup(
    name='curve_pricing',
    version='0.1',
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        'pydantic>=2.5',
        'flask',
        'flask-openapi3>=3',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'curve_pricing = curve_pricing.webapi.webapi:main',
        ],
    },
)
