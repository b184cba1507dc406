"""
This module describes where the circuit compilation toolchain puts the artifacts of a single circuit
"""
import os
from enum import Enum
from typing import List


class ArtifactKind(Enum):
    WASM = 'witness binary'
    ZKEY = 'proving key'
    VKEY = 'verification key'

    def __init__(self, description: str):
        self.description = description


class CircuitArtifacts:
    """
    Source paths of the compiled artifacts of one circuit.

    Expected layout::

        <build_dir>/<name>/<name>_js/<name>.wasm
        <build_dir>/<name>/<name>_final.zkey
        <build_dir>/<name>/verification_key.json
    """

    def __init__(self, build_dir: str, name: str):
        self.build_dir = build_dir
        self.name = name

    @property
    def source_dir(self) -> str:
        return os.path.join(self.build_dir, self.name)

    @property
    def wasm_dir(self) -> str:
        return os.path.join(self.source_dir, f'{self.name}_js')

    @property
    def wasm(self) -> str:
        return os.path.join(self.wasm_dir, f'{self.name}.wasm')

    @property
    def zkey(self) -> str:
        return os.path.join(self.source_dir, f'{self.name}_final.zkey')

    @property
    def vkey(self) -> str:
        return os.path.join(self.source_dir, 'verification_key.json')

    def get_source(self, kind: ArtifactKind) -> str:
        if kind == ArtifactKind.WASM:
            return self.wasm
        elif kind == ArtifactKind.ZKEY:
            return self.zkey
        else:
            return self.vkey

    def required_paths(self) -> List[str]:
        """All paths which must exist before anything of this circuit is copied, in the order they are checked."""
        return [self.source_dir, self.wasm_dir, self.wasm, self.zkey, self.vkey]
