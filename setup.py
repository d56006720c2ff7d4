from setuptools import setup

setup(
    name='sentex',
    version='0.1.0',
    description='Scanner and grammar validator for simple punctuated sentences',
    package_dir={'': 'src'},
    packages=['sentex', 'sentex.parser', 'sentex.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'sx = sentex.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
