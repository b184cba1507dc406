"""
The main circuitdist package.

==========
Submodules
==========
* :py:mod:`.__main__`: circuitdist command line interface
* :py:mod:`.config`: Global circuitdist configuration (both user-configuration as well as internal configuration)
* :py:mod:`.circuits`: Layout of the compiled artifacts of a circuit inside the build directory
* :py:mod:`.destinations`: Downstream consumers of the circuit artifacts and the profiles which select them
* :py:mod:`.distributor`: Validation and copying of circuit artifacts to all destinations

===========
Subpackages
===========
* :py:mod:`.errors`: Defines exceptions which may be raised by public circuitdist interfaces
* :py:mod:`.my_logging`: Logging facilities
* :py:mod:`.utils`: Internal helper functionality
"""
