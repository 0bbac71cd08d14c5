"""
Shared test configuration for backend tests.

Adds the backend directory to sys.path so tests can import `lovefold` and
`app` without installing the package, and provides PDB text fixtures.
"""
import os
import sys

import pytest

backend_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)


def _atom_line(serial, atom_name, res_num, x, y, z, plddt, res_name="ALA", record="ATOM  "):
    """Format one ATOM/HETATM line with standard PDB column layout."""
    return (
        f"{record}{serial:5d}  {atom_name:<3s} {res_name:>3s} A{res_num:4d}    "
        f"{x:8.3f}{y:8.3f}{z:8.3f}  1.00{plddt:6.2f}           {atom_name[0]:>2s}"
    )


@pytest.fixture
def atom_line():
    """Factory for well-formed ATOM lines."""
    return _atom_line


@pytest.fixture
def sample_pdb():
    """
    Three-residue model in ESMFold output style.

    CA atoms span 20 x 5 x 2.5 A with pLDDT 90 / 80 / 70 (mean 80, High).
    """
    lines = [
        "HEADER    LOVEFOLD TEST MODEL",
        _atom_line(1, "N", 1, 1.0, 1.0, 1.0, 90.0),
        _atom_line(2, "CA", 1, 0.0, 0.0, 0.0, 90.0),
        _atom_line(3, "CA", 2, 10.0, 0.0, 0.0, 80.0, res_name="GLY"),
        _atom_line(4, "CA", 3, 20.0, 5.0, 2.5, 70.0, res_name="SER"),
        _atom_line(5, "ZN", 4, 50.0, 50.0, 50.0, 10.0, res_name="ZN", record="HETATM"),
        "TER       5      SER A   3",
        "END",
    ]
    return "\n".join(lines) + "\n"
