"""
This module defines the circuitdist options which are configurable by the user via configuration files,
environment variables and command line arguments.

The argument parser in :py:mod:`.__main__` uses the docstrings, type hints and _values for the help
 strings and the _values fields for autocompletion

WARNING: This is one of the only circuitdist modules that is imported before argcomplete.autocomplete is called. \
For performance reasons it should thus not have any import side-effects or perform any expensive operations during import.
"""
import os
from typing import Any, List, Optional, Union

from appdirs import AppDirs

from circuitdist.destinations import destinationparams, profileparams


def _check_is_one_of(val: str, legal_vals):
    if val not in legal_vals:
        raise ValueError(f'Invalid config value {val}, must be one of {legal_vals}')


def _type_check(val: Any, t):
    if not isinstance(val, t):
        raise ValueError(f'Value {val} has wrong type (expected {t})')


def _to_name_list(val: Union[str, List[str]]) -> List[str]:
    if isinstance(val, str):
        val = [v.strip() for v in val.split(',') if v.strip()]
    _type_check(val, list)
    for v in val:
        _type_check(v, str)
    if not val:
        raise ValueError('List must not be empty')
    return list(val)


class UserConfig:
    def __init__(self):
        self._appdirs = AppDirs('circuitdist', appauthor=False, version=None, roaming=True)

        # User configuration
        # Each attribute must have a type hint and a docstring for correct help strings in the commandline interface.
        # If 'Available Options: [...]' is specified, the options are used for autocomplete suggestions.
        # Path options which are None are derived from other options when accessed.

        # Source
        self._circuits_root: Optional[str] = None
        self._build_dir: Optional[str] = None

        # Sibling project roots
        self._sibling_prefix: str = 'cipherpay'
        self._relayer_root: Optional[str] = None
        self._sdk_root: Optional[str] = None
        self._ui_root: Optional[str] = None
        self._zkaudit_root: Optional[str] = None

        # Destination roots
        self._relayer_e2e_dir: Optional[str] = None
        self._sdk_circuits_dir: Optional[str] = None
        self._ui_circuits_dir: Optional[str] = None
        self._zkaudit_ui_circuits_dir: Optional[str] = None
        self._zkaudit_server_circuits_dir: Optional[str] = None

        # Selection
        self._profile: str = 'standard'
        self._profile_values = list(profileparams.keys())
        self._circuits: Optional[List[str]] = None
        self._destinations: Optional[List[str]] = None
        self._destinations_values = list(destinationparams.keys())

        self._log_dir: str = self._appdirs.user_log_dir
        self._verbosity: int = 1

    def _sibling(self, suffix: str) -> str:
        return os.path.normpath(os.path.join(self.circuits_root, os.pardir, f'{self.sibling_prefix}-{suffix}'))

    @property
    def circuits_root(self) -> str:
        """
        Root directory of the circuits project.

        Default: the current working directory
        """
        return self._circuits_root if self._circuits_root is not None else os.getcwd()

    @circuits_root.setter
    def circuits_root(self, val: str):
        _type_check(val, str)
        self._circuits_root = val

    @property
    def build_dir(self) -> str:
        """
        Directory containing one build subdirectory per circuit, as produced by the circuit compilation toolchain.

        Default: <circuits_root>/build
        """
        return self._build_dir if self._build_dir is not None else os.path.join(self.circuits_root, 'build')

    @build_dir.setter
    def build_dir(self, val: str):
        _type_check(val, str)
        self._build_dir = val

    @property
    def sibling_prefix(self) -> str:
        """Naming prefix shared by the sibling project directories next to the circuits project."""
        return self._sibling_prefix

    @sibling_prefix.setter
    def sibling_prefix(self, val: str):
        _type_check(val, str)
        self._sibling_prefix = val

    @property
    def relayer_root(self) -> str:
        """
        Root directory of the relayer project.

        Default: <circuits_root>/../<sibling_prefix>-relayer-solana
        """
        return self._relayer_root if self._relayer_root is not None else self._sibling('relayer-solana')

    @relayer_root.setter
    def relayer_root(self, val: str):
        _type_check(val, str)
        self._relayer_root = val

    @property
    def sdk_root(self) -> str:
        """
        Root directory of the SDK project.

        Default: <circuits_root>/../<sibling_prefix>-sdk
        """
        return self._sdk_root if self._sdk_root is not None else self._sibling('sdk')

    @sdk_root.setter
    def sdk_root(self, val: str):
        _type_check(val, str)
        self._sdk_root = val

    @property
    def ui_root(self) -> str:
        """
        Root directory of the UI project.

        Default: <circuits_root>/../<sibling_prefix>-ui
        """
        return self._ui_root if self._ui_root is not None else self._sibling('ui')

    @ui_root.setter
    def ui_root(self, val: str):
        _type_check(val, str)
        self._ui_root = val

    @property
    def zkaudit_root(self) -> str:
        """
        Root directory of the zkAudit project (contains both the audit UI and the audit server packages).

        Default: <circuits_root>/../<sibling_prefix>-zkaudit
        """
        return self._zkaudit_root if self._zkaudit_root is not None else self._sibling('zkaudit')

    @zkaudit_root.setter
    def zkaudit_root(self, val: str):
        _type_check(val, str)
        self._zkaudit_root = val

    @property
    def relayer_e2e_dir(self) -> str:
        """
        Relayer test fixture directory, artifacts go to <relayer_e2e_dir>/<circuit>/proof.

        Default: <relayer_root>/tests/e2e
        """
        if self._relayer_e2e_dir is not None:
            return self._relayer_e2e_dir
        return os.path.join(self.relayer_root, 'tests', 'e2e')

    @relayer_e2e_dir.setter
    def relayer_e2e_dir(self, val: str):
        _type_check(val, str)
        self._relayer_e2e_dir = val

    @property
    def sdk_circuits_dir(self) -> str:
        """
        SDK circuit directory, artifacts go to <sdk_circuits_dir>/<circuit>.

        Default: <sdk_root>/src/circuits
        """
        if self._sdk_circuits_dir is not None:
            return self._sdk_circuits_dir
        return os.path.join(self.sdk_root, 'src', 'circuits')

    @sdk_circuits_dir.setter
    def sdk_circuits_dir(self, val: str):
        _type_check(val, str)
        self._sdk_circuits_dir = val

    @property
    def ui_circuits_dir(self) -> str:
        """
        UI public circuit directory, artifacts go to <ui_circuits_dir>/<circuit>.

        Default: <ui_root>/public/circuits
        """
        if self._ui_circuits_dir is not None:
            return self._ui_circuits_dir
        return os.path.join(self.ui_root, 'public', 'circuits')

    @ui_circuits_dir.setter
    def ui_circuits_dir(self, val: str):
        _type_check(val, str)
        self._ui_circuits_dir = val

    @property
    def zkaudit_ui_circuits_dir(self) -> str:
        """
        zkAudit UI public circuit directory, artifacts go to <zkaudit_ui_circuits_dir>/<circuit>.

        Default: <zkaudit_root>/packages/zkaudit-ui/public/circuits
        """
        if self._zkaudit_ui_circuits_dir is not None:
            return self._zkaudit_ui_circuits_dir
        return os.path.join(self.zkaudit_root, 'packages', 'zkaudit-ui', 'public', 'circuits')

    @zkaudit_ui_circuits_dir.setter
    def zkaudit_ui_circuits_dir(self, val: str):
        _type_check(val, str)
        self._zkaudit_ui_circuits_dir = val

    @property
    def zkaudit_server_circuits_dir(self) -> str:
        """
        zkAudit server verification key directory, keys go to <zkaudit_server_circuits_dir>/<circuit>/<circuit>_v1.vk.json.

        Default: <zkaudit_root>/packages/zkaudit-server/assets/vk
        """
        if self._zkaudit_server_circuits_dir is not None:
            return self._zkaudit_server_circuits_dir
        return os.path.join(self.zkaudit_root, 'packages', 'zkaudit-server', 'assets', 'vk')

    @zkaudit_server_circuits_dir.setter
    def zkaudit_server_circuits_dir(self, val: str):
        _type_check(val, str)
        self._zkaudit_server_circuits_dir = val

    @property
    def profile(self) -> str:
        """
        Selects the default circuit and destination lists.

        standard: deposit, transfer, withdraw -> relayer, sdk, ui
        zkaudit:  additionally audit_payment, audit_withdraw -> additionally zkaudit-ui, zkaudit-server

        Available Options: [standard, zkaudit]
        """
        return self._profile

    @profile.setter
    def profile(self, val: str):
        _check_is_one_of(val, self._profile_values)
        self._profile = val

    @property
    def circuits(self) -> List[str]:
        """
        Circuits to distribute, processed in the given order.

        Default: circuit list of the selected profile
        """
        if self._circuits is not None:
            return list(self._circuits)
        return list(profileparams[self.profile]['circuits'])

    @circuits.setter
    def circuits(self, val: List[str]):
        self._circuits = _to_name_list(val)

    @property
    def destinations(self) -> List[str]:
        """
        Consumers which receive the artifacts.

        Default: destination list of the selected profile

        Available Options: [relayer, sdk, ui, zkaudit-ui, zkaudit-server]
        """
        if self._destinations is not None:
            return list(self._destinations)
        return list(profileparams[self.profile]['destinations'])

    @destinations.setter
    def destinations(self, val: List[str]):
        val = _to_name_list(val)
        for v in val:
            _check_is_one_of(v, self._destinations_values)
        self._destinations = val

    @property
    def log_dir(self) -> str:
        """Path to default log directory."""
        return self._log_dir

    @log_dir.setter
    def log_dir(self, val: str):
        _type_check(val, str)
        if not os.path.exists(val):
            os.makedirs(val)
        self._log_dir = val

    @property
    def verbosity(self) -> int:
        """
        If 0, no output
        If 1, normal output
        If 2, verbose output (additionally prints every validated source path)
        """
        return self._verbosity

    @verbosity.setter
    def verbosity(self, val: int):
        _type_check(val, int)
        self._verbosity = val
