from glob import glob
from setuptools import setup


setup(
    name='rpncalc',
    version='0.1.0',
    description='RPN calculator keypad',
    install_requires=[
        'regex',
        'prompt_toolkit>=3',
    ],
    packages=['rpncalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.6',
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
