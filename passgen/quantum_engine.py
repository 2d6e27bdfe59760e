"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.
"""

from __future__ import annotations

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator


class QuantumEngine:
    """
    Samples one random bitstring per run on the local Aer simulator.
    """

    def __init__(self, num_qubits: int = 20) -> None:
        if num_qubits <= 0:
            raise ValueError(f"num_qubits must be positive, got {num_qubits}")

        self.num_qubits = num_qubits
        self.backend = AerSimulator()

        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "n_qubits", None) or getattr(backend_cfg, "num_qubits", None)
        if max_qubits is not None and num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSourceConfig."
            )

    def build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Measure even qubits in the Z basis and odd qubits in the X basis.

        Every qubit gets exactly one H gate. On even qubits it prepares |+>,
        which is uniform in Z. On odd qubits it is the basis change for
        measuring |0> in X, which is also uniform. A second H would undo the
        first and leave the qubit at a constant 0.
        """
        n = self.num_qubits
        measurement_basis: list[str] = []

        qc = QuantumCircuit(n, n)
        for i in range(n):
            measurement_basis.append("X" if i % 2 == 1 else "Z")
            qc.h(i)
            qc.measure(i, i)

        return qc, measurement_basis

    def sample_with_meta(self) -> tuple[list[int], list[str], QuantumCircuit]:
        """
        Run the circuit for a single shot and return:
        - list of bits (0/1), index 0 being qubit 0
        - measurement basis per qubit: "Z" or "X"
        - the (untranspiled) circuit
        """
        qc, measurement_basis = self.build_circuit()
        tqc = transpile(qc, self.backend)

        result = self.backend.run(tqc, shots=1).result()
        # counts looks like {'0101...': 1}
        bitstring = next(iter(result.get_counts()))

        # Qiskit orders bits as [q_(n-1) ... q_0].
        bits = [int(b) for b in reversed(bitstring)]
        return bits, measurement_basis, qc

    def sample(self) -> list[int]:
        bits, _basis, _circuit = self.sample_with_meta()
        return bits
