import json
import os

from parameterized import parameterized

from circuitdist.config import environment_variables
from circuitdist.tests.circuitdist_unit_test import CircuitDistTestCase


class TestConfig(CircuitDistTestCase):

    def test_sibling_defaults(self):
        c = self.make_config()
        self.assertEqual(c.build_dir, os.path.join(self.circuits_root, 'build'))
        self.assertEqual(c.relayer_e2e_dir, self.sibling('cipherpay-relayer-solana', 'tests', 'e2e'))
        self.assertEqual(c.sdk_circuits_dir, self.sibling('cipherpay-sdk', 'src', 'circuits'))
        self.assertEqual(c.ui_circuits_dir, self.sibling('cipherpay-ui', 'public', 'circuits'))
        self.assertEqual(c.zkaudit_ui_circuits_dir,
                         self.sibling('cipherpay-zkaudit', 'packages', 'zkaudit-ui', 'public', 'circuits'))
        self.assertEqual(c.zkaudit_server_circuits_dir,
                         self.sibling('cipherpay-zkaudit', 'packages', 'zkaudit-server', 'assets', 'vk'))

    def test_sibling_prefix(self):
        c = self.make_config(sibling_prefix='acme')
        self.assertEqual(c.sdk_root, self.sibling('acme-sdk'))

    def test_derived_defaults_follow_root(self):
        c = self.make_config(relayer_root='/srv/relayer')
        self.assertEqual(c.relayer_e2e_dir, os.path.join('/srv/relayer', 'tests', 'e2e'))

        c.relayer_e2e_dir = '/srv/fixtures'
        self.assertEqual(c.relayer_e2e_dir, '/srv/fixtures')

    def test_profiles(self):
        c = self.make_config()
        self.assertEqual(c.circuits, ['deposit', 'transfer', 'withdraw'])
        self.assertEqual(c.destinations, ['relayer', 'sdk', 'ui'])

        c.profile = 'zkaudit'
        self.assertEqual(c.circuits, ['deposit', 'transfer', 'withdraw', 'audit_payment', 'audit_withdraw'])
        self.assertEqual([d.dest_name for d in c.get_destinations()],
                         ['relayer', 'sdk', 'ui', 'zkaudit-ui', 'zkaudit-server'])

    def test_explicit_lists_win_over_profile(self):
        c = self.make_config(circuits='withdraw, deposit', destinations=['sdk'])
        c.profile = 'zkaudit'
        self.assertEqual(c.circuits, ['withdraw', 'deposit'])
        self.assertEqual(c.get_destinations()[0].root, c.sdk_circuits_dir)
        self.assertEqual(len(c.get_destinations()), 1)

    @parameterized.expand([
        ('unknown_option', {'relayer_url': 'x'}),
        ('bad_profile', {'profile': 'everything'}),
        ('bad_destination', {'destinations': ['sdk', 'mobile']}),
        ('empty_circuits', {'circuits': []}),
        ('wrong_type', {'verbosity': 'loud'}),
        ('internal_value', {'_is_unit_test': False}),
    ])
    def test_invalid_overrides(self, _, overrides):
        c = self.make_config()
        with self.assertRaises(ValueError):
            c.override_defaults(overrides)

    def test_local_config_file(self):
        cfg_file = os.path.join(self.workspace, 'circuitdist.json')
        with open(cfg_file, 'w') as f:
            json.dump({'profile': 'zkaudit', 'ui_root': '/srv/ui'}, f)

        c = self.make_config()
        c.load_configuration_from_disk(cfg_file)

        self.assertEqual(c.profile, 'zkaudit')
        self.assertEqual(c.ui_circuits_dir, os.path.join('/srv/ui', 'public', 'circuits'))

    def test_invalid_config_file_names_file(self):
        cfg_file = os.path.join(self.workspace, 'broken.json')
        with open(cfg_file, 'w') as f:
            json.dump({'verbosity': 'high'}, f)

        c = self.make_config()
        with self.assertRaises(ValueError) as ctx:
            c.load_configuration_from_disk(cfg_file)
        self.assertIn('broken.json', str(ctx.exception))
        self.assertIn('verbosity', str(ctx.exception))

    def test_missing_config_file_is_ignored(self):
        c = self.make_config()
        c.load_configuration_from_disk(os.path.join(self.workspace, 'nope.json'))
        self.assertEqual(c.profile, 'standard')

    def test_environment(self):
        c = self.make_config()
        c.load_configuration_from_environment({
            'CIRCUITS_BUILD_DIR': '/ci/build',
            'SDK_ROOT': '/ci/sdk',
            'UI_CIRCUITS_DIR': '/ci/ui-circuits',
            'ZKAUDIT_CIRCUITS_DIR': '/ci/audit-ui',
            'CIRCUITDIST_PROFILE': 'zkaudit',
            'RELAYER_ROOT': '',
            'PATH': '/usr/bin',
        })

        self.assertEqual(c.build_dir, '/ci/build')
        self.assertEqual(c.sdk_circuits_dir, os.path.join('/ci/sdk', 'src', 'circuits'))
        self.assertEqual(c.ui_circuits_dir, '/ci/ui-circuits')
        self.assertEqual(c.zkaudit_ui_circuits_dir, '/ci/audit-ui')
        self.assertEqual(c.profile, 'zkaudit')
        # empty values are ignored
        self.assertEqual(c.relayer_root, self.sibling('cipherpay-relayer-solana'))

    def test_environment_lists(self):
        c = self.make_config()
        c.load_configuration_from_environment({'CIRCUITDIST_CIRCUITS': 'deposit,withdraw',
                                               'CIRCUITDIST_DESTINATIONS': 'relayer,sdk'})
        self.assertEqual(c.circuits, ['deposit', 'withdraw'])
        self.assertEqual(c.destinations, ['relayer', 'sdk'])

    def test_invalid_environment(self):
        c = self.make_config()
        with self.assertRaises(ValueError) as ctx:
            c.load_configuration_from_environment({'CIRCUITDIST_PROFILE': 'nope'})
        self.assertIn('environment', str(ctx.exception))

    def test_environment_variables_map_to_options(self):
        c = self.make_config()
        for name in environment_variables.values():
            self.assertTrue(hasattr(c, name), name)

    def test_version(self):
        self.assertRegex(self.make_config().circuitdist_version, r'^\d+\.\d+\.\d+$')
