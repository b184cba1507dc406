"""
This package contains the public exception hierarchy.

==========
Submodules
==========
* :py:mod:`.exceptions`: Errors raised while distributing circuit artifacts
"""
