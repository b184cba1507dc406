"""
This module defines the circuitdist version, which is read from the VERSION file shipped with the package
"""
import os


class Versions:
    # Read circuitdist version from VERSION file
    with open(os.path.join(os.path.realpath(os.path.dirname(__file__)), 'VERSION')) as f:
        CIRCUITDIST_VERSION = f.read().strip()
