import glob
import os

from setuptools import find_packages, setup

top_level_modules = [os.path.splitext(os.path.basename(p))[0] for p in glob.glob('src/*.py')]

setup(
    name='timegrid',
    version='0.1.0',
    packages=find_packages(where='src', exclude=['tests']),
    package_dir={'': 'src'},
    py_modules=top_level_modules,
    include_package_data=True,
    python_requires='>=3.9',
    install_requires=[
        'numpy',
        'pandas',
        'loguru',
    ],
    extras_require={
        'test': ['pytest'],
    },
    description='Day-grid resampling of timestamped records',
)
