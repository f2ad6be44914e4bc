from gridkit.engine.patterns import (
    common_difference,
    detect_pattern,
    extrapolate,
    find_difference,
)
from gridkit.shared.utils import to_number


class TestDetectPattern:
    def test_arithmetic_progression(self):
        pattern = detect_pattern([2, 4, 6])
        assert pattern == [2, 4, 6]
        assert common_difference(pattern) == 2

    def test_fill_from_detected_difference(self):
        difference = common_difference(detect_pattern([2, 4, 6]))
        assert extrapolate(10, difference, source_row=0, target_row=3) == 16

    def test_numeric_strings_are_coerced(self):
        assert detect_pattern(["1", "3", " 5 "]) == [1, 3, 5]

    def test_non_numeric_sample_is_no_pattern(self):
        samples = [1, "x"]
        assert detect_pattern(samples) == [1, "x"]
        assert common_difference(detect_pattern(samples)) == 0
        assert find_difference(samples) is None

    def test_irregular_numbers_are_no_pattern(self):
        assert detect_pattern([1, 2, 4]) == [1, 2, 4]
        assert find_difference([1, 2, 4]) is None

    def test_equality_is_exact(self):
        # 0.1 + 0.1 * 2 != 0.3 in binary floating point
        assert find_difference([0.1, 0.2, 0.3]) is None

    def test_too_short_sample(self):
        assert detect_pattern([5]) == [5]
        assert detect_pattern([]) == []
        assert find_difference([5]) is None

    def test_descending_and_constant(self):
        assert find_difference([24, 22]) == -2
        assert find_difference([7, 7, 7]) == 0

    def test_booleans_are_not_numbers(self):
        assert to_number(True) is None
        assert detect_pattern([True, False]) == [True, False]

    def test_to_number(self):
        assert to_number("12") == 12
        assert to_number("2.5") == 2.5
        assert to_number("") is None
        assert to_number(None) is None
        assert to_number("12abc") is None
