"""
This module exposes the functionality to validate compiled circuit artifacts and copy them to all configured destinations
"""
import os
import shutil
from typing import List, Tuple

from circuitdist import my_logging
from circuitdist.circuits import ArtifactKind, CircuitArtifacts
from circuitdist.config import Config
from circuitdist.destinations import Destination
from circuitdist.errors.exceptions import DistributionError, MissingArtifactError, ArtifactCopyError
from circuitdist.my_logging.log_context import log_context
from circuitdist.utils.progress_printer import success_print, warn_print
from circuitdist.utils.timer import time_measure

# Order in which the artifacts of one circuit are copied
copy_order = (ArtifactKind.WASM, ArtifactKind.ZKEY, ArtifactKind.VKEY)


class DistributionReport:
    """Everything a run has copied so far, in copy order."""

    def __init__(self):
        self.copied: List[Tuple[str, str]] = []
        self.completed_circuits: List[str] = []

    @property
    def targets(self) -> List[str]:
        return [dst for _, dst in self.copied]

    def __len__(self):
        return len(self.copied)


class ArtifactDistributor:
    """
    Copies the artifacts of all configured circuits to all configured destinations.

    Circuits are processed strictly in the configured order. The first missing source or failing copy
    aborts the run, everything copied before stays in place.
    """

    def __init__(self, config: Config):
        self.cfg = config
        self.circuits: List[str] = config.circuits
        self.destinations: List[Destination] = config.get_destinations()

    def validate(self, circuit: str) -> CircuitArtifacts:
        """
        Check that the circuit build directory and all artifacts of 'circuit' exist.

        :raise MissingArtifactError: for the first required path which does not exist
        """
        artifacts = CircuitArtifacts(self.cfg.build_dir, circuit)
        for path in artifacts.required_paths():
            self._must_exist(path)
            my_logging.debug(f'Found {path}')
            self.cfg.dist_print(f'  found {path}', verbosity_level=2)
        return artifacts

    def copy_artifact(self, src: str, dst: str):
        """
        Copy 'src' to 'dst' byte by byte, creating missing parent directories and overwriting an existing file.

        :raise ArtifactCopyError: if directory creation or copying fails
        """
        try:
            os.makedirs(os.path.dirname(dst), exist_ok=True)
            shutil.copyfile(src, dst)
        except OSError as e:
            raise ArtifactCopyError(src, dst, e) from e
        my_logging.info(f'Copied {src} -> {dst}')
        self.cfg.dist_print(f'✔ Copied {src} -> {dst}')

    def run(self) -> DistributionReport:
        """
        Distribute the artifacts of all circuits.

        :return: report listing all copied files
        :raise DistributionError: on the first failure, the partial report is attached as 'report'
        """
        report = DistributionReport()
        try:
            self._print_header()
            self._must_exist(self.cfg.build_dir)
            for circuit in self.circuits:
                self._distribute_circuit(circuit, report)
        except DistributionError as e:
            e.report = report
            my_logging.error(f'Aborted: {e} ({len(report)} files copied before the failure)')
            raise

        if self.cfg.verbosity and not self.cfg.is_unit_test:
            with success_print():
                print('All artifacts copied successfully ✅', end='')
            print()
        return report

    def _distribute_circuit(self, circuit: str, report: DistributionReport):
        with log_context(circuit), time_measure(f'distribute_{circuit}'):
            artifacts = self.validate(circuit)
            for kind in copy_order:
                src = artifacts.get_source(kind)
                for dest in self.destinations:
                    if dest.accepts(kind):
                        dst = dest.get_target(circuit, kind)
                        self.copy_artifact(src, dst)
                        report.copied.append((src, dst))

        for dest in self.destinations:
            self.cfg.dist_print(f'➜ {circuit}: done -> {dest.get_circuit_dir(circuit)}\n')
        report.completed_circuits.append(circuit)

    def _print_header(self):
        self.cfg.dist_print('Copying circuit proof artifacts...')
        self.cfg.dist_print(f'Source build: {self.cfg.build_dir}')
        for dest in self.destinations:
            self.cfg.dist_print(f'Destination {dest.label}: {dest.root}')
            if not os.path.isdir(dest.root):
                my_logging.info(f'Destination root {dest.root} does not exist yet')
                if self.cfg.verbosity and not self.cfg.is_unit_test:
                    with warn_print():
                        print('  (does not exist yet, will be created)', end='')
                    print()
        self.cfg.dist_print('')

    @staticmethod
    def _must_exist(path: str):
        if not os.path.exists(path):
            raise MissingArtifactError(path)


def distribute_artifacts(config: Config) -> DistributionReport:
    """Validate and copy the artifacts of all circuits configured in 'config'."""
    return ArtifactDistributor(config).run()
