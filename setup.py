import os

from setuptools import setup, find_packages


def _read_file(path: str) -> str:
    with open(path) as f:
        return f.read().strip()


# Versions
file_dir = os.path.dirname(os.path.realpath(__file__))
circuitdist_version = _read_file(os.path.join(file_dir, 'circuitdist', 'VERSION'))
packages = find_packages(include=['circuitdist', 'circuitdist.*'])


setup(
    # Metadata
    name='circuitdist',
    version=circuitdist_version,
    license='MIT',
    description='circuitdist copies compiled zk-SNARK circuit artifacts (witness generators, proving keys and '
                'verification keys) from a circuits build directory into the relayer, SDK, UI and audit projects '
                'which consume them.',

    # Dependencies
    python_requires='>=3.8,<4',
    install_requires=[
        'appdirs>=1.4,<1.5',
        'argcomplete>=1,<4',
    ],
    extras_require={
        'test': [
            'parameterized>=0.7,<1',
        ],
    },

    # Contents
    packages=packages,
    package_data={'circuitdist': ['VERSION']},
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "circuitdist=circuitdist.__main__:main"
        ]
    },
)
