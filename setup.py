from setuptools import find_packages, setup

setup(
    name='bezier-studio',
    version='0.1.0',
    description='Adaptive Bezier curve sampling and Forrest degree reduction',
    packages=find_packages(exclude=['tests']),
    py_modules=['main'],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'opencv-python',
        'colorlog',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'bezier-studio = main:main',
        ],
    },
)
