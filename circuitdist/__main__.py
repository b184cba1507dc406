#!/usr/bin/env python3
# PYTHON_ARGCOMPLETE_OK
import argparse
import sys
from typing import List

import argcomplete
from argcomplete.completers import FilesCompleter, DirectoriesCompleter

from circuitdist.config_user import UserConfig
from circuitdist.config_version import Versions
from circuitdist.utils.progress_printer import fail_print

# Exit codes
EXIT_MISSING_ARTIFACT = 1
EXIT_COPY_FAILED = 2
EXIT_CONFIG_ERROR = 42


def parse_config_doc():
    import textwrap
    from typing import get_type_hints
    __ucfg = UserConfig()

    docs = {}
    for name, prop in vars(UserConfig).items():
        if name.startswith('_') or not isinstance(prop, property):
            continue
        t = get_type_hints(prop.fget)['return']
        doc = prop.__doc__
        choices = None
        if hasattr(__ucfg, f'_{name}_values'):
            choices = getattr(__ucfg, f'_{name}_values')
        default_val = getattr(__ucfg, name)
        if isinstance(default_val, list):
            default_val = ', '.join(default_val)
        docs[name] = (
            f"type: {getattr(t, '__name__', t)}\n\n"
            f"{textwrap.dedent(doc).strip()}\n\n"
            f"Current default: {str(default_val).replace('%', '%%')}", t, choices)
    return docs


def parse_arguments(argv=None):
    class ShowSuppressedInHelpFormatter(argparse.RawTextHelpFormatter):
        def add_usage(self, usage, actions, groups, prefix=None):
            if usage is not argparse.SUPPRESS:
                actions = [action for action in actions if action.metavar != '<cfg_val>']
                args = usage, actions, groups, prefix
                self._add_item(self._format_usage, args)

    msg = 'Copy compiled circuit artifacts (witness binaries, proving keys, verification keys) ' \
          'into the downstream projects.\n\n' \
          'All settings can also be provided via config.json files and environment variables.'
    main_parser = argparse.ArgumentParser(prog='circuitdist', description=msg,
                                          formatter_class=ShowSuppressedInHelpFormatter)
    config_files = ('json', )

    msg = 'Path to local configuration file (defaults to "circuitdist.json" in cwd). ' \
          'This file (if it exists), overrides settings defined in the global configuration.'
    main_parser.add_argument('--config-file', default='circuitdist.json', metavar='<config_file>', help=msg).completer = FilesCompleter(config_files)
    main_parser.add_argument('--log', action='store_true', help='write info, debug and timing logs to the log directory')
    main_parser.add_argument('--version', action='version', version=f'%(prog)s {Versions.CIRCUITDIST_VERSION}')

    msg = 'These parameters override settings from configuration files and environment variables'
    cfg_group = main_parser.add_argument_group(title='Configuration Options', description=msg)

    # Expose config_user.py options via command line arguments
    for name, (doc, t, choices) in parse_config_doc().items():
        flag = f'--{name.replace("_", "-")}'
        if t is int:
            cfg_group.add_argument(flag, type=int, dest=name, metavar='<cfg_val>', help=doc)
        elif t == List[str]:
            cfg_group.add_argument(flag, nargs='+', dest=name, metavar='<cfg_val>', help=doc, choices=choices)
        else:
            arg = cfg_group.add_argument(flag, dest=name, metavar='<cfg_val>', help=doc, choices=choices)
            if name.endswith('dir') or name.endswith('root'):
                arg.completer = DirectoriesCompleter()

    # parse
    argcomplete.autocomplete(main_parser, always_complete_options=False)
    return main_parser.parse_args(argv)


def main(argv=None, config=None):
    # parse arguments
    a = parse_arguments(argv)

    from circuitdist import my_logging
    from circuitdist.config import cfg
    from circuitdist.distributor import distribute_artifacts
    from circuitdist.errors.exceptions import MissingArtifactError, ArtifactCopyError

    if config is None:
        config = cfg

    # The evaluation order for configuration loading is:
    # Default values in config_user.py -> Site config.json -> user config.json -> local config file -> environment -> cmdline arguments
    # Settings defined at a later stage override setting values defined at an earlier stage
    try:
        config.load_configuration_from_disk(a.config_file)
        config.load_configuration_from_environment()

        override_dict = {}
        for name in vars(UserConfig):
            if name[0] != '_' and hasattr(a, name):
                val = getattr(a, name)
                if val is not None:
                    override_dict[name] = val
        config.override_defaults(override_dict)
    except Exception as e:
        with fail_print():
            print(f"✖ ERROR: Failed to load configuration\n{e}", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    # Enable logging
    if a.log:
        log_file = my_logging.get_log_file(label='distribute', parent_dir=config.log_dir, filename='distribute')
        my_logging.prepare_logger(log_file, silent=config.verbosity < 2)

    try:
        distribute_artifacts(config)
    except MissingArtifactError as e:
        with fail_print():
            print(f'✖ {e}', file=sys.stderr)
        sys.exit(EXIT_MISSING_ARTIFACT)
    except ArtifactCopyError as e:
        with fail_print():
            print(f'✖ Failed to copy artifacts: {e}', file=sys.stderr)
        sys.exit(EXIT_COPY_FAILED)
    sys.exit(0)


if __name__ == '__main__':
    main()
