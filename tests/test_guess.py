from cribbage_quiz.engine.guess import Correct, Incorrect, evaluate_numeric


def test_single_number():
    assert evaluate_numeric(["12"], 12) == Correct()


def test_words_are_summed():
    assert evaluate_numeric(["2", "2", "1"], 5) == Correct()


def test_off_by_reports_absolute_difference():
    assert evaluate_numeric(["3"], 8) == Incorrect("You were off by 5")
    assert evaluate_numeric(["10", "3"], 8) == Incorrect("You were off by 5")


def test_numeric_guess_has_no_details():
    assert evaluate_numeric(["1"], 2).details == ""


def test_empty_words_sum_to_zero():
    assert evaluate_numeric([], 0) == Correct()
    assert evaluate_numeric([], 4) == Incorrect("You were off by 4")
