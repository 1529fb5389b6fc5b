from setuptools import find_packages, setup


setup(
    name='aocutil',
    version='0.1',
    description='Input reading and grid geometry for small puzzle programs',
    # long_description=...
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python',
        'Topic :: Games/Entertainment :: Puzzle Games',
    ],

    packages=find_packages(),
    python_requires='>=3.6',
    install_requires=[
        'zope.interface',
    ],
    extras_require={
        'test': ['pytest'],
    },

    entry_points={
        'console_scripts': [
            'aoc = aocutil.harness:main',
        ],
    },
)
