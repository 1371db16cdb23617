"""
Unit tests for the signal extractor.
"""

import pytest
from promptsmith.services.signals import (
    count_sentences,
    count_words,
    extract_signals,
)

class TestCounts:
    """Test word and sentence counting."""

    def test_single_word(self):
        assert count_words("Hi") == 1
        assert count_sentences("Hi") == 1

    def test_sentences_split_on_terminal_punctuation(self):
        assert count_sentences("One. Two! Three? Four") == 4

    def test_repeated_punctuation_is_one_break(self):
        assert count_sentences("Wait... what?!") == 2

    def test_empty_segments_are_ignored(self):
        assert count_sentences("...!?") == 0

    def test_words_split_on_any_whitespace(self):
        assert count_words("one  two\nthree\tfour") == 4

class TestCues:
    """Test cue detection."""

    def test_all_cues_present(self, well_formed_prompt):
        signals = extract_signals(well_formed_prompt)
        assert signals.has_role_cue
        assert signals.has_context_cue
        assert signals.has_instruction_cue
        assert signals.has_example_cue
        assert signals.has_stepwise_cue
        assert not signals.has_format_cue

    def test_cues_are_case_insensitive(self):
        signals = extract_signals("ACT AS a lawyer. ENSURE the FORMAT is a table. For Instance, a lease.")
        assert signals.has_role_cue
        assert signals.has_instruction_cue
        assert signals.has_format_cue
        assert signals.has_example_cue

    @pytest.mark.parametrize("length,expected", [(150, False), (151, True)])
    def test_long_prompt_counts_as_context(self, length, expected):
        signals = extract_signals("x" * length)
        assert signals.has_context_cue is expected
        assert signals.char_count == length

    def test_structure_counts_as_format(self):
        assert extract_signals("Use this structure: intro, body").has_format_cue

    def test_no_cues(self):
        signals = extract_signals("Summarize this article")
        assert signals.word_count == 3
        assert not any([
            signals.has_role_cue,
            signals.has_context_cue,
            signals.has_instruction_cue,
            signals.has_format_cue,
            signals.has_example_cue,
            signals.has_stepwise_cue,
        ])
