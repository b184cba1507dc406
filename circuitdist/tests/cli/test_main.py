import io
import json
import os
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from circuitdist.__main__ import main, parse_arguments, EXIT_MISSING_ARTIFACT, EXIT_COPY_FAILED, \
    EXIT_CONFIG_ERROR
from circuitdist.config import Config
from circuitdist.tests.circuitdist_unit_test import CircuitDistTestCase


class TestMain(CircuitDistTestCase):

    def run_main(self, *args, env=None):
        """Run the command line interface, return (exit code, stderr output)."""
        config = Config()
        config.is_unit_test = True
        # site and user config.json are looked up inside the workspace only
        config._appdirs = mock.Mock(site_config_dir=os.path.join(self.workspace, 'site'),
                                    user_config_dir=os.path.join(self.workspace, 'user'))
        argv = ['--config-file', os.path.join(self.workspace, 'circuitdist.json'), *args]
        err = io.StringIO()
        with mock.patch.dict(os.environ, env or {}, clear=True), redirect_stderr(err), redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(argv, config=config)
        return ctx.exception.code, err.getvalue()

    def test_success(self):
        for name in ['deposit', 'transfer', 'withdraw']:
            self.build_circuit(name)
        code, _ = self.run_main('--circuits-root', self.circuits_root)

        self.assertEqual(code, 0)
        self.assertTrue(os.path.isfile(self.sibling('cipherpay-ui', 'public', 'circuits', 'withdraw', 'withdraw_vkey.json')))

    def test_environment_drives_run(self):
        self.build_circuit('deposit')
        code, _ = self.run_main(env={'CIRCUITS_ROOT': self.circuits_root,
                                     'CIRCUITDIST_CIRCUITS': 'deposit',
                                     'CIRCUITDIST_DESTINATIONS': 'sdk'})

        self.assertEqual(code, 0)
        self.assertTrue(os.path.isfile(self.sibling('cipherpay-sdk', 'src', 'circuits', 'deposit', 'deposit.wasm')))
        self.assertFalse(os.path.exists(self.sibling('cipherpay-relayer-solana')))

    def test_cmdline_overrides_environment(self):
        self.build_circuit('deposit')
        sdk = self.sibling('override')
        code, _ = self.run_main('--sdk-circuits-dir', sdk, '--circuits', 'deposit', '--destinations', 'sdk',
                                env={'CIRCUITS_ROOT': self.circuits_root, 'SDK_CIRCUITS_DIR': self.sibling('from-env')})

        self.assertEqual(code, 0)
        self.assertTrue(os.path.isfile(os.path.join(sdk, 'deposit', 'deposit_vkey.json')))
        self.assertFalse(os.path.exists(self.sibling('from-env')))

    def test_missing_artifact(self):
        self.build_circuit('deposit')
        code, err = self.run_main('--circuits-root', self.circuits_root, '--circuits', 'deposit', 'transfer')

        self.assertEqual(code, EXIT_MISSING_ARTIFACT)
        self.assertIn(f'Not found: {os.path.join(self.build_dir, "transfer")}', err)

    def test_copy_failure(self):
        self.build_circuit('deposit')
        sdk = self.sibling('sdk-is-a-file')
        with open(sdk, 'w') as f:
            f.write('not a directory')
        code, err = self.run_main('--circuits-root', self.circuits_root, '--circuits', 'deposit',
                                  '--destinations', 'sdk', '--sdk-circuits-dir', sdk)

        self.assertEqual(code, EXIT_COPY_FAILED)
        self.assertIn('✖ Failed to copy artifacts', err)
        self.assertIn(os.path.join(sdk, 'deposit', 'deposit.wasm'), err)

    def test_user_config_file(self):
        self.build_circuit('deposit')
        os.makedirs(self.sibling('user'))
        with open(self.sibling('user', 'config.json'), 'w') as f:
            json.dump({'circuits': ['deposit'], 'destinations': ['ui']}, f)
        code, _ = self.run_main('--circuits-root', self.circuits_root)

        self.assertEqual(code, 0)
        self.assertTrue(os.path.isfile(self.sibling('cipherpay-ui', 'public', 'circuits', 'deposit', 'deposit.wasm')))
        self.assertFalse(os.path.exists(self.sibling('cipherpay-relayer-solana')))

    def test_invalid_config_file(self):
        with open(os.path.join(self.workspace, 'circuitdist.json'), 'w') as f:
            json.dump({'profile': 'all'}, f)
        code, err = self.run_main('--circuits-root', self.circuits_root)

        self.assertEqual(code, EXIT_CONFIG_ERROR)
        self.assertIn('profile', err)

    def test_invalid_environment(self):
        code, _ = self.run_main(env={'CIRCUITDIST_DESTINATIONS': 'relayer,mobile'})
        self.assertEqual(code, EXIT_CONFIG_ERROR)

    def test_parse_arguments(self):
        a = parse_arguments(['--profile', 'zkaudit', '--destinations', 'sdk', 'zkaudit-server', '--verbosity', '2'])
        self.assertEqual(a.profile, 'zkaudit')
        self.assertEqual(a.destinations, ['sdk', 'zkaudit-server'])
        self.assertEqual(a.verbosity, 2)
        self.assertIsNone(a.build_dir)
        self.assertFalse(a.log)

    def test_invalid_choice_on_cmdline(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            parse_arguments(['--profile', 'everything'])
        self.assertEqual(ctx.exception.code, 2)
