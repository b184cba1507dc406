import json
import os
from typing import Dict, Any, List, Mapping, Optional

from circuitdist.config_user import UserConfig
from circuitdist.config_version import Versions
from circuitdist.destinations import Destination, get_root_option

# Environment variables which override user config values (same names as used by the old copy scripts)
environment_variables = {
    'CIRCUITS_ROOT': 'circuits_root',
    'CIRCUITS_BUILD_DIR': 'build_dir',
    'RELAYER_ROOT': 'relayer_root',
    'SDK_ROOT': 'sdk_root',
    'UI_ROOT': 'ui_root',
    'ZKAUDIT_ROOT': 'zkaudit_root',
    'RELAYER_E2E_DIR': 'relayer_e2e_dir',
    'SDK_CIRCUITS_DIR': 'sdk_circuits_dir',
    'UI_CIRCUITS_DIR': 'ui_circuits_dir',
    'ZKAUDIT_CIRCUITS_DIR': 'zkaudit_ui_circuits_dir',
    'ZKAUDIT_SERVER_CIRCUITS_DIR': 'zkaudit_server_circuits_dir',
    'CIRCUITDIST_PROFILE': 'profile',
    'CIRCUITDIST_CIRCUITS': 'circuits',
    'CIRCUITDIST_DESTINATIONS': 'destinations',
}


def is_user_option(name: str) -> bool:
    return not name.startswith('_') and isinstance(vars(UserConfig).get(name), property)


class Config(UserConfig):
    def __init__(self):
        super().__init__()

        # Internal values
        self._is_unit_test = False

    def dist_print(self, *args, verbosity_level=1, **kwargs):
        if (verbosity_level <= self.verbosity) and not self.is_unit_test:
            print(*args, **kwargs)

    def _load_cfg_file_if_exists(self, filename):
        if os.path.exists(filename):
            with open(filename) as conf:
                try:
                    self.override_defaults(json.load(conf))
                except ValueError as e:
                    raise ValueError(f'{e} (in file "{filename}")')

    def load_configuration_from_disk(self, local_cfg_file: str):
        # Load global configuration file
        global_config_dir = self._appdirs.site_config_dir
        global_cfg_file = os.path.join(global_config_dir, 'config.json')
        self._load_cfg_file_if_exists(global_cfg_file)

        # Load user configuration file
        user_config_dir = self._appdirs.user_config_dir
        user_cfg_file = os.path.join(user_config_dir, 'config.json')
        self._load_cfg_file_if_exists(user_cfg_file)

        # Load local configuration file
        self._load_cfg_file_if_exists(local_cfg_file)

    def load_configuration_from_environment(self, environ: Optional[Mapping[str, str]] = None):
        """
        Override config values with the environment variables listed in :py:data:`environment_variables`.

        Unset and empty variables are ignored.
        """
        if environ is None:
            environ = os.environ
        overrides = {}
        for var, name in environment_variables.items():
            val = environ.get(var)
            if val:
                overrides[name] = val
        try:
            self.override_defaults(overrides)
        except ValueError as e:
            raise ValueError(f'{e} (in environment)')

    def override_defaults(self, overrides: Dict[str, Any]):
        for arg, val in overrides.items():
            if not is_user_option(arg):
                raise ValueError(f'Tried to override non-existing config value {arg}')
            try:
                setattr(self, arg, val)
            except ValueError as e:
                raise ValueError(f'{e} (for entry "{arg}")')

    def get_destinations(self) -> List[Destination]:
        """Return the configured destinations with their root directories resolved."""
        return [Destination(name, getattr(self, get_root_option(name))) for name in self.destinations]

    @property
    def circuitdist_version(self) -> str:
        """circuitdist version number"""
        return Versions.CIRCUITDIST_VERSION

    @property
    def is_unit_test(self) -> bool:
        return self._is_unit_test

    @is_unit_test.setter
    def is_unit_test(self, val: bool):
        self._is_unit_test = val


cfg = Config()
