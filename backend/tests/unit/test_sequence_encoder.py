"""Tests for name -> amino acid sequence encoding."""
import string

import pytest

from lovefold.fold_types import MAX_SEQUENCE_LENGTH, LengthError, LinkerStrategy, LoveSequence
from lovefold.sequence_encoder import (
    CANONICAL_AMINO_ACIDS,
    EMPTY_NAME_FILLER,
    LETTER_TO_AMINO,
    LINKER_CONFIGS,
    create_love_sequence,
    get_linker_config,
    is_length_error,
    name_to_amino_sequence,
)


class TestLetterTable:
    """Test the 26-letter mapping."""

    def test_table_is_total(self):
        assert set(LETTER_TO_AMINO) == set(string.ascii_uppercase)

    def test_values_are_canonical(self):
        assert set(LETTER_TO_AMINO.values()) <= CANONICAL_AMINO_ACIDS
        assert len(CANONICAL_AMINO_ACIDS) == 20

    @pytest.mark.parametrize("letter,amino", [
        ("B", "N"), ("J", "L"), ("O", "Q"), ("U", "C"), ("X", "A"), ("Z", "E"),
    ])
    def test_ambiguous_letters(self, letter, amino):
        assert LETTER_TO_AMINO[letter] == amino

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            LETTER_TO_AMINO["B"] = "D"

    def test_name_to_amino_sequence(self):
        assert name_to_amino_sequence("Bob") == "NQN"
        assert name_to_amino_sequence("José") == "LQSE"


class TestLinkerConfigs:
    """Test strategy -> motif mapping."""

    def test_every_strategy_has_config(self):
        assert set(LINKER_CONFIGS) == set(LinkerStrategy)

    def test_motifs(self):
        assert LINKER_CONFIGS[LinkerStrategy.FLEXIBLE].motif == "GGSGGS"
        assert LINKER_CONFIGS[LinkerStrategy.ANCHOR].motif == "WPHWP"
        assert LINKER_CONFIGS[LinkerStrategy.CYSTEINE].motif == "GGSGGS"

    def test_only_cysteine_has_terminal_residue(self):
        assert LINKER_CONFIGS[LinkerStrategy.CYSTEINE].terminal_residue == "C"
        assert LINKER_CONFIGS[LinkerStrategy.FLEXIBLE].terminal_residue == ""
        assert LINKER_CONFIGS[LinkerStrategy.ANCHOR].terminal_residue == ""

    def test_lookup_by_string(self):
        assert get_linker_config("anchor") is LINKER_CONFIGS[LinkerStrategy.ANCHOR]

    def test_unknown_strategy_raises(self):
        with pytest.raises(ValueError):
            get_linker_config("zipper")


class TestCreateLoveSequence:
    """Test sequence composition."""

    def test_default_strategy_is_anchor(self):
        result = create_love_sequence("Alice", "Bob")
        assert isinstance(result, LoveSequence)
        assert result.sequence == "ALICEWPHWPNQN"
        assert result.strategy == LinkerStrategy.ANCHOR

    def test_flexible(self):
        result = create_love_sequence("Alice", "Bob", LinkerStrategy.FLEXIBLE)
        assert result.sequence == "ALICEGGSGGSNQN"

    def test_cysteine_adds_terminal_cysteines(self):
        result = create_love_sequence("Alice", "Bob", LinkerStrategy.CYSTEINE)
        assert result.sequence == "CALICEGGSGGSNQNC"

    def test_strategy_as_string(self):
        assert create_love_sequence("Alice", "Bob", "flexible").sequence == "ALICEGGSGGSNQN"

    def test_segments_reported(self):
        result = create_love_sequence("Alice", "Bob", LinkerStrategy.CYSTEINE)
        assert result.name1_segment == "ALICE"
        assert result.name2_segment == "NQN"
        assert result.linker == "GGSGGS"

    @pytest.mark.parametrize("strategy", list(LinkerStrategy))
    def test_length_is_sum_of_parts(self, strategy):
        result = create_love_sequence("Alexandra", "Maximilian", strategy)
        extra = 2 if strategy == LinkerStrategy.CYSTEINE else 0
        assert len(result.sequence) == (
            len(result.name1_segment) + len(result.linker) + len(result.name2_segment) + extra
        )

    def test_empty_first_name_uses_filler(self):
        result = create_love_sequence("", "Bob")
        assert result.name1_segment == EMPTY_NAME_FILLER
        assert result.sequence == "AAAWPHWPNQN"

    def test_empty_second_name_uses_filler(self):
        result = create_love_sequence("Alice", "")
        assert result.name2_segment == EMPTY_NAME_FILLER
        assert result.sequence == "ALICEWPHWPAAA"

    def test_unencodable_name_uses_filler(self):
        result = create_love_sequence("123", "李")
        assert result.sequence == "AAAWPHWPAAA"

    def test_sequence_alphabet_is_canonical(self):
        result = create_love_sequence("Жанна Ωmega", "Björn-Ulf", LinkerStrategy.CYSTEINE)
        assert set(result.sequence) <= CANONICAL_AMINO_ACIDS

    def test_deterministic(self):
        first = create_love_sequence("Alice", "Bob", LinkerStrategy.FLEXIBLE)
        second = create_love_sequence("Alice", "Bob", LinkerStrategy.FLEXIBLE)
        assert first == second


class TestLengthLimit:
    """Test the 400-residue limit."""

    def test_too_long_returns_length_error(self):
        result = create_love_sequence("A" * 200, "B" * 200)
        assert isinstance(result, LengthError)
        assert is_length_error(result)
        assert result.actual_length == 405
        assert result.max_length == MAX_SEQUENCE_LENGTH

    def test_exactly_max_length_is_accepted(self):
        result = create_love_sequence("A" * 197, "B" * 197, LinkerStrategy.FLEXIBLE)
        assert isinstance(result, LoveSequence)
        assert len(result.sequence) == 400

    def test_cysteine_terminals_count_towards_limit(self):
        assert isinstance(create_love_sequence("A" * 196, "B" * 196, "cysteine"), LoveSequence)
        result = create_love_sequence("A" * 197, "B" * 197, "cysteine")
        assert isinstance(result, LengthError)
        assert result.actual_length == 402

    def test_strategy_changes_outcome(self):
        # 198 + 5 + 197 fits with the shorter anchor motif only
        assert isinstance(create_love_sequence("A" * 198, "B" * 197, "anchor"), LoveSequence)
        assert isinstance(create_love_sequence("A" * 198, "B" * 197, "flexible"), LengthError)

    def test_error_message_names_limit(self):
        result = create_love_sequence("A" * 300, "B" * 300)
        assert "605" in result.message
        assert "max 400" in result.message
