"""
This module stores metadata about the downstream consumers of the circuit artifacts, which is used by config.py
and the distributor
"""
import os
from typing import List, Tuple

from circuitdist.circuits import ArtifactKind

_all_kinds = (ArtifactKind.WASM, ArtifactKind.ZKEY, ArtifactKind.VKEY)

destinationparams = {
    'relayer': {
        'label': 'Relayer',
        'root_option': 'relayer_e2e_dir',
        'circuit_subdir': 'proof',
        'vkey_filename': '{name}_vkey.json',
        'artifacts': _all_kinds
    },
    'sdk': {
        'label': 'SDK',
        'root_option': 'sdk_circuits_dir',
        'circuit_subdir': None,
        'vkey_filename': '{name}_vkey.json',
        'artifacts': _all_kinds
    },
    'ui': {
        'label': 'UI',
        'root_option': 'ui_circuits_dir',
        'circuit_subdir': None,
        'vkey_filename': '{name}_vkey.json',
        'artifacts': _all_kinds
    },
    'zkaudit-ui': {
        'label': 'zkAudit UI',
        'root_option': 'zkaudit_ui_circuits_dir',
        'circuit_subdir': None,
        'vkey_filename': '{name}_vkey.json',
        'artifacts': _all_kinds
    },
    'zkaudit-server': {
        'label': 'zkAudit server',
        'root_option': 'zkaudit_server_circuits_dir',
        'circuit_subdir': None,
        'vkey_filename': '{name}_v1.vk.json',
        # the audit server only verifies proofs
        'artifacts': (ArtifactKind.VKEY, )
    },
}

profileparams = {
    'standard': {
        'circuits': ['deposit', 'transfer', 'withdraw'],
        'destinations': ['relayer', 'sdk', 'ui']
    },
    'zkaudit': {
        'circuits': ['deposit', 'transfer', 'withdraw', 'audit_payment', 'audit_withdraw'],
        'destinations': ['relayer', 'sdk', 'ui', 'zkaudit-ui', 'zkaudit-server']
    }
}


class Destination:

    def __init__(self, dest_name: str, root: str):
        if dest_name not in destinationparams:
            raise ValueError(f'Unknown destination {dest_name}')
        self.dest_name = dest_name
        self.root = root

    def __eq__(self, other):
        return isinstance(other, Destination) and (self.dest_name, self.root) == (other.dest_name, other.root)

    def __hash__(self):
        return hash((self.dest_name, self.root))

    def __repr__(self):
        return f'Destination({self.dest_name!r}, {self.root!r})'

    @property
    def label(self) -> str:
        return destinationparams[self.dest_name]['label']

    @property
    def artifacts(self) -> Tuple[ArtifactKind, ...]:
        return destinationparams[self.dest_name]['artifacts']

    def accepts(self, kind: ArtifactKind) -> bool:
        return kind in self.artifacts

    def get_circuit_dir(self, circuit: str) -> str:
        """Return the directory which receives the artifacts of 'circuit'"""
        d = os.path.join(self.root, circuit)
        subdir = destinationparams[self.dest_name]['circuit_subdir']
        return d if subdir is None else os.path.join(d, subdir)

    def get_filename(self, circuit: str, kind: ArtifactKind) -> str:
        """
        Return the name under which an artifact of kind 'kind' is stored at this destination.

        Witness binaries and proving keys keep their original name, verification keys are renamed per consumer.
        """
        if kind == ArtifactKind.WASM:
            return f'{circuit}.wasm'
        elif kind == ArtifactKind.ZKEY:
            return f'{circuit}_final.zkey'
        else:
            return destinationparams[self.dest_name]['vkey_filename'].format(name=circuit)

    def get_target(self, circuit: str, kind: ArtifactKind) -> str:
        return os.path.join(self.get_circuit_dir(circuit), self.get_filename(circuit, kind))


def get_root_option(dest_name: str) -> str:
    return destinationparams[dest_name]['root_option']


def all_destination_names() -> List[str]:
    return list(destinationparams.keys())
