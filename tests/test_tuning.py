"""Tests for tuning strategies.

Tests cover:
- Equal temperament ratios
- Just intonation positions, ratios and chord ratio display
- Auto tuning placement, the recompute/query contract and display
- The abstract strategy contract
"""

import pytest

from harmonic_tuner.core import BaseReference, NoteNotPlacedError
from harmonic_tuner.tuning import (
    TuningStrategy,
    EqualTemperament,
    JustIntonation,
    AutoTuningTemperament,
)


@pytest.fixture
def reference():
    return BaseReference(frequency=261.63, note=60)


class TestStrategyContract:
    """Test behaviour shared by every strategy."""

    def test_strategy_without_ratio_cannot_be_created(self):
        class Incomplete(TuningStrategy):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    @pytest.mark.parametrize("cls", [EqualTemperament, JustIntonation, AutoTuningTemperament])
    def test_base_note_has_ratio_one(self, cls, reference):
        strategy = cls(reference)
        assert strategy.frequencies([60]) == {60: 261.63}
        assert strategy.ratio(60) == 1.0

    @pytest.mark.parametrize("cls", [EqualTemperament, JustIntonation, AutoTuningTemperament])
    def test_empty_and_single_note_display(self, cls, reference):
        strategy = cls(reference)
        assert strategy.format_ratio_display([]) == ""
        assert strategy.format_ratio_display([64]) == ""
        assert strategy.frequencies([]) == {}

    @pytest.mark.parametrize("cls", [EqualTemperament, JustIntonation])
    def test_batch_matches_single_note(self, cls, reference):
        strategy = cls(reference)
        notes = [55, 60, 63, 66, 70, 79]
        batch = strategy.frequencies(notes)
        for note in notes:
            assert batch[note] == strategy.frequency(note)

    def test_default_reference(self):
        strategy = JustIntonation()
        assert strategy.base_note == 60
        assert strategy.base_frequency == 261.63


class TestEqualTemperament:
    """Test 12-tone equal temperament."""

    def test_octaves(self, reference):
        et = EqualTemperament(reference)
        assert et.ratio(60) == 1.0
        assert et.ratio(72) == 2.0
        assert et.ratio(48) == 0.5

    def test_semitone(self, reference):
        et = EqualTemperament(reference)
        assert et.ratio(61) == pytest.approx(2 ** (1 / 12))

    def test_monotonic(self, reference):
        et = EqualTemperament(reference)
        ratios = [et.ratio(n) for n in range(36, 96)]
        assert all(a < b for a, b in zip(ratios, ratios[1:])), "Ratios should rise with note number"

    def test_no_ratio_display(self, reference):
        et = EqualTemperament(reference)
        assert et.format_ratio_display([60, 64, 67]) == ""


class TestJustIntonation:
    """Test fixed 5-limit just intonation."""

    def test_basic_intervals(self, reference):
        ji = JustIntonation(reference)
        assert ji.ratio(60) == 1.0
        assert ji.ratio(64) == 1.25
        assert ji.ratio(67) == 1.5
        assert ji.ratio(72) == 2.0

    def test_pitch_class_table(self, reference):
        ji = JustIntonation(reference)
        expected = [1, 16 / 15, 9 / 8, 6 / 5, 5 / 4, 4 / 3, 64 / 45, 3 / 2, 8 / 5, 5 / 3, 16 / 9, 15 / 8]
        for offset, ratio in enumerate(expected):
            assert ji.ratio(60 + offset) == pytest.approx(ratio), f"Wrong ratio for offset {offset}"

    def test_notes_below_base(self, reference):
        ji = JustIntonation(reference)
        assert ji.calc_position(59) == (-4, 1, 1)
        assert ji.ratio(59) == 0.9375   # 15/16
        assert ji.ratio(55) == 0.75     # 3/4
        assert ji.ratio(48) == 0.5

    def test_positions(self, reference):
        ji = JustIntonation(reference)
        assert ji.positions([60, 76]) == {60: (0, 0, 0), 76: (-1, 0, 1)}

    def test_frequency(self):
        ji = JustIntonation(BaseReference(frequency=440.0, note=69))
        assert ji.frequency(76) == 660.0
        assert ji.frequency(69) == 440.0

    def test_major_triad_display(self, reference):
        ji = JustIntonation(reference)
        assert ji.format_ratio_display([60, 64, 67]) == "4 : 5 : 6 (60)"

    def test_display_sorted_by_pitch(self, reference):
        ji = JustIntonation(reference)
        assert ji.format_ratio_display([67, 60, 64]) == "4 : 5 : 6 (60)"

    def test_minor_triad_display(self, reference):
        ji = JustIntonation(reference)
        assert ji.format_ratio_display([60, 63, 67]) == "10 : 12 : 15 (60)"

    def test_dominant_seventh_display(self, reference):
        ji = JustIntonation(reference)
        assert ji.format_ratio_display([60, 64, 67, 70]) == "36 : 45 : 54 : 64 (8640)"

    def test_display_without_base_note(self, reference):
        ji = JustIntonation(reference)
        assert ji.format_ratio_display([64, 67]) == "5 : 6 (30)"
        assert ji.format_ratio_display([62, 74]) == "1 : 2 (2)"

    def test_follows_shared_reference(self, reference):
        ji = JustIntonation(reference)
        reference.update(note=62)
        assert ji.ratio(69) == 1.5


class TestAutoTuningTemperament:
    """Test nearest-distance lattice placement."""

    def test_base_only(self, reference):
        auto = AutoTuningTemperament(reference)
        auto.recompute([60])
        assert auto.ratio(60) == 1.0

    def test_fifth_from_base(self, reference):
        auto = AutoTuningTemperament(reference)
        freqs = auto.frequencies([60, 67])
        assert auto.ratio(67) == 1.5
        assert freqs[67] == pytest.approx(261.63 * 1.5)

    def test_base_is_scaffolding_only(self, reference):
        auto = AutoTuningTemperament(reference)
        positions = auto.recompute([64, 67])
        assert 60 not in positions, "Base note should be removed when not sounding"
        assert positions == {67: (-1, 1, 0), 64: (-2, 0, 1)}
        assert auto.ratio(64) == 1.25
        assert auto.ratio(67) == 1.5

    def test_major_triad_display(self, reference):
        auto = AutoTuningTemperament(reference)
        assert auto.format_ratio_display([60, 64, 67]) == "4 : 5 : 6 (60)"

    def test_seventh_links_to_fifth(self, reference):
        """The minor seventh is placed a minor third above the fifth (9/5)."""
        auto = AutoTuningTemperament(reference)
        auto.recompute([60, 64, 67, 70])
        assert auto.positions[70] == (0, 2, -1)
        assert auto.ratio(70) == 1.8
        assert auto.format_ratio_display([60, 64, 67, 70]) == "20 : 25 : 30 : 36 (900)"

    def test_note_below_base(self, reference):
        auto = AutoTuningTemperament(reference)
        auto.recompute([53, 60])
        assert auto.ratio(53) == pytest.approx(2 / 3)

    def test_ties_go_to_first_unplaced_note(self, reference):
        """G3 and F4 are equally close to the base; whichever comes first is placed first."""
        auto = AutoTuningTemperament(reference)

        g_first = auto.positions_for([55, 57, 65])
        assert g_first == {55: (-2, 1, 0), 57: (-5, 3, 0), 65: (-2, 3, -1)}

        f_first = auto.positions_for([65, 57, 55])
        assert f_first == {65: (2, -1, 0), 57: (-1, -1, 1), 55: (2, -3, 1)}

        assert g_first != f_first, "Chord shape should follow input order on ties"

    def test_harmonic_distance(self, reference):
        auto = AutoTuningTemperament(reference)
        assert auto.harmonic_distance(0) == 0
        assert auto.harmonic_distance(12) == 4
        assert auto.harmonic_distance(7) == 13
        assert auto.harmonic_distance(4) == 41

    def test_query_before_recompute_raises(self, reference):
        auto = AutoTuningTemperament(reference)
        with pytest.raises(NoteNotPlacedError):
            auto.ratio(64)

    def test_query_for_note_outside_active_set_raises(self, reference):
        auto = AutoTuningTemperament(reference)
        auto.recompute([60, 67])
        with pytest.raises(KeyError):
            auto.ratio(64)
        assert auto.active_notes == [60, 67], "A failed query must not change the cache"

    def test_recompute_replaces_cache(self, reference):
        auto = AutoTuningTemperament(reference)
        auto.recompute([60, 64])
        auto.recompute([60, 67])
        assert set(auto.positions) == {60, 67}

    def test_recompute_ignores_duplicates(self, reference):
        auto = AutoTuningTemperament(reference)
        auto.recompute([60, 67, 67])
        assert auto.active_notes == [60, 67]

    def test_positions_for_does_not_touch_cache(self, reference):
        auto = AutoTuningTemperament(reference)
        assert auto.positions_for([60, 67]) == {60: (0, 0, 0), 67: (-1, 1, 0)}
        assert auto.positions == {}
        assert auto.positions_for([]) == {}

    def test_reset(self, reference):
        auto = AutoTuningTemperament(reference)
        auto.recompute([60, 67])
        auto.reset()
        assert auto.positions == {}
        assert auto.active_notes == []

    def test_idempotent(self, reference):
        auto = AutoTuningTemperament(reference)
        notes = [62, 65, 69, 72]
        first = (auto.frequencies(notes), auto.format_ratio_display(notes))
        second = (auto.frequencies(notes), auto.format_ratio_display(notes))
        assert first == second
