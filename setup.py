from setuptools import setup, find_packages

setup(
    name='suppr',
    version='0.1.0',
    packages=find_packages(exclude=['suppr.tests']),
    include_package_data=True,
    install_requires=[
        'typer[all]',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'suppr=suppr.cli:run'
        ]
    },
    author='John Kwiatkoski',
    description='A small Kubernetes debugger that reports cluster health through kubectl',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
