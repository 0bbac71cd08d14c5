"""Tests for the fixed-column PDB ATOM parser."""
from lovefold.pdb_parser import parse_atom_line, parse_pdb_records


def _replace(line, start, end, text):
    """Overwrite columns [start, end) of a PDB line."""
    return line[:start] + text.rjust(end - start) + line[end:]


class TestParseAtomLine:
    """Test single-line parsing."""

    def test_well_formed_line(self, atom_line):
        record = parse_atom_line(atom_line(7, "CA", 12, 1.5, -2.25, 3.0, 87.5))
        assert record.x == 1.5
        assert record.y == -2.25
        assert record.z == 3.0
        assert record.b_factor == 87.5
        assert record.atom_name == "CA"
        assert record.residue_seq == 12

    def test_hetatm_ignored(self, atom_line):
        line = atom_line(1, "ZN", 1, 0.0, 0.0, 0.0, 50.0, res_name="ZN", record="HETATM")
        assert parse_atom_line(line) is None

    def test_non_atom_lines_ignored(self):
        assert parse_atom_line("REMARK   1 ATOM-like text") is None
        assert parse_atom_line("END") is None
        assert parse_atom_line("") is None

    def test_bad_coordinate_drops_line(self, atom_line):
        line = _replace(atom_line(1, "CA", 1, 1.0, 2.0, 3.0, 90.0), 38, 46, "abc")
        assert parse_atom_line(line) is None

    def test_non_finite_coordinate_drops_line(self, atom_line):
        line = _replace(atom_line(1, "CA", 1, 1.0, 2.0, 3.0, 90.0), 46, 54, "nan")
        assert parse_atom_line(line) is None

    def test_truncated_line_dropped(self):
        assert parse_atom_line("ATOM      1  CA  ALA A   1       1.000") is None

    def test_bad_residue_number_kept(self, atom_line):
        line = _replace(atom_line(1, "CA", 1, 1.0, 2.0, 3.0, 90.0), 22, 26, "XX")
        record = parse_atom_line(line)
        assert record is not None
        assert record.residue_seq is None
        assert record.atom_name == "CA"

    def test_missing_b_factor_kept(self, atom_line):
        line = atom_line(1, "CA", 1, 1.0, 2.0, 3.0, 90.0)[:54]
        record = parse_atom_line(line)
        assert record is not None
        assert record.b_factor is None


class TestParsePdbRecords:
    """Test whole-file parsing."""

    def test_one_good_one_bad(self, atom_line):
        good = atom_line(1, "CA", 1, 1.0, 2.0, 3.0, 90.0)
        bad = _replace(atom_line(2, "CA", 2, 1.0, 2.0, 3.0, 90.0), 30, 38, "x.y.z")
        assert len(parse_pdb_records(f"{good}\n{bad}\n")) == 1

    def test_sample_file(self, sample_pdb):
        records = parse_pdb_records(sample_pdb)
        assert len(records) == 4
        assert [r.atom_name for r in records] == ["N", "CA", "CA", "CA"]

    def test_order_preserved_without_dedup(self, atom_line):
        line_a = atom_line(1, "CA", 1, 1.0, 0.0, 0.0, 90.0)
        line_b = atom_line(2, "CA", 2, 2.0, 0.0, 0.0, 90.0)
        records = parse_pdb_records("\n".join([line_b, line_a, line_b]))
        assert [r.x for r in records] == [2.0, 1.0, 2.0]

    def test_crlf_line_endings(self, atom_line):
        text = "\r\n".join([atom_line(1, "CA", 1, 1.0, 0.0, 0.0, 90.0)] * 2)
        assert len(parse_pdb_records(text)) == 2

    def test_empty_and_non_atom_text(self):
        assert parse_pdb_records("") == []
        assert parse_pdb_records("HEADER    NOTHING\nEND\n") == []

    def test_only_newline_splits_lines(self, atom_line):
        # form feed and line separator inside the residue name column
        line = atom_line(1, "CA", 1, 1.0, 2.0, 3.0, 90.0)
        form_feed = line[:17] + "\x0c" + line[18:]
        line_sep = line[:17] + "\u2028" + line[18:]
        records = parse_pdb_records(f"{form_feed}\n{line_sep}\n")
        assert len(records) == 2
        assert [r.z for r in records] == [3.0, 3.0]
