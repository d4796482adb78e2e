"""
Unit Tests for Selection and the cost component classification

Run with: pytest tuition/tests/test_models.py -v
"""

import dataclasses

import pytest

from tuition.components import (
    ALL,
    Books,
    FoodAndHousing,
    Miscellaneous,
    Transportation,
    TuitionAndFees,
    direct_components,
    indirect_components,
)
from tuition.models import Level, Residency, Housing, Term, Selection


# =============================================================================
# SELECTION TESTS
# =============================================================================

class TestSelection:

    def test_defaults(self):
        selection = Selection(level="graduate")
        assert selection.residency is Residency.RESIDENT
        assert selection.hours == 15
        assert selection.housing is Housing.HOME
        assert selection.term is Term.FALL_AND_SPRING
        assert selection.selected_hall is None
        assert selection.selected_meal == "none"

    def test_strings_become_enums(self):
        selection = Selection(level="undergraduate", residency="nonresident", housing="off campus", term="single")
        assert selection.level is Level.UNDERGRADUATE
        assert selection.residency is Residency.NONRESIDENT
        assert selection.housing is Housing.OFF_CAMPUS
        assert selection.term is Term.SINGLE

    @pytest.mark.parametrize("value, expected", [
        ("single-semester", Term.SINGLE),
        ("Single Semester", Term.SINGLE),
        ("fall-and-spring", Term.FALL_AND_SPRING),
        ("Fall & Spring", Term.FALL_AND_SPRING),
        ("FALLSPRING", Term.FALL_AND_SPRING),
    ])
    def test_term_spellings(self, value, expected):
        assert Selection(level="graduate", term=value).term is expected

    @pytest.mark.parametrize("value, expected", [
        ("Non-Resident", Residency.NONRESIDENT),
        ("off-campus", Housing.OFF_CAMPUS),
        ("Off_Campus", Housing.OFF_CAMPUS),
        ("Undergraduate", Level.UNDERGRADUATE),
    ])
    def test_case_and_separator_insensitive(self, value, expected):
        assert type(expected)(value) is expected

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            Selection(level="doctoral")
        with pytest.raises(ValueError):
            Selection(level="graduate", term="summer")

    def test_hours_not_range_checked(self):
        """Out-of-range hours are left for the engine to report as incomplete."""
        assert Selection(level="graduate", hours=99).hours == 99

    def test_hours_coerced_to_int(self):
        assert Selection(level="graduate", hours="12").hours == 12

    @pytest.mark.parametrize("hours", [12.0, "12.0"])
    def test_whole_float_hours_accepted(self, hours):
        assert Selection(level="graduate", hours=hours).hours == 12

    @pytest.mark.parametrize("hours", [15.9, "15.5", "twelve", float("nan"), True])
    def test_fractional_hours_rejected(self, hours):
        with pytest.raises(ValueError):
            Selection(level="graduate", hours=hours)

    def test_empty_meal_means_none(self):
        assert Selection(level="graduate", selected_meal="").selected_meal == "none"

    def test_immutable(self):
        selection = Selection(level="graduate")
        with pytest.raises(dataclasses.FrozenInstanceError):
            selection.hours = 12

    def test_value_equality(self):
        assert Selection(level="graduate", term="single") == Selection(level=Level.GRADUATE, term=Term.SINGLE)

    def test_flags(self):
        selection = Selection(level="graduate", housing="dorm", term="single")
        assert selection.is_dorm
        assert selection.is_single_semester


# =============================================================================
# CLASSIFICATION TESTS
# =============================================================================

class TestComponents:

    def test_display_order(self):
        assert ALL == [TuitionAndFees, FoodAndHousing, Transportation, Miscellaneous, Books]

    def test_tuition_always_direct(self):
        for housing in Housing:
            assert TuitionAndFees.is_direct(housing)

    def test_food_and_housing_direct_only_in_dorm(self):
        assert FoodAndHousing.is_direct(Housing.DORM)
        assert FoodAndHousing.is_indirect(Housing.HOME)
        assert FoodAndHousing.is_indirect(Housing.OFF_CAMPUS)

    def test_room_and_board_label(self):
        assert FoodAndHousing.label_for(Housing.DORM) == "Room & Board"
        assert FoodAndHousing.label_for(Housing.HOME) == "Food & Housing"

    @pytest.mark.parametrize("housing", list(Housing))
    def test_split_covers_every_component_once(self, housing):
        direct = direct_components(housing)
        indirect = indirect_components(housing)
        assert sorted(c.name for c in direct + indirect) == sorted(c.name for c in ALL)
        assert not set(direct) & set(indirect)

    @pytest.mark.parametrize("housing", list(Housing))
    def test_ancillary_lines_always_indirect(self, housing):
        for component in (Transportation, Miscellaneous, Books):
            assert component in indirect_components(housing)
