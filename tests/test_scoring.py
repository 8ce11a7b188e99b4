from services.scoring import correct_option_text, percentage_of, score_quiz


def quiz(*marks):
    return [
        {
            "id": f"q{i}",
            "marks": m,
            "options": [{"text": "yes", "isCorrect": True}, {"text": "no", "isCorrect": False}],
        }
        for i, m in enumerate(marks)
    ]


def test_all_correct_scores_full_marks():
    questions = quiz(2, 3, 5)
    result = score_quiz(questions, {q["id"]: "yes" for q in questions}, 100, 40)

    assert result["score"] == 3
    assert result["marksObtained"] == result["totalMarks"] == 10
    assert result["percentage"] == 100
    assert result["passed"] is True


def test_no_answers_fails():
    result = score_quiz(quiz(2, 3, 5), {}, 100, 40)

    assert result["marksObtained"] == 0
    assert result["percentage"] == 0
    assert result["passed"] is False


def test_pass_boundary_is_inclusive():
    questions = quiz(1, 1)
    result = score_quiz(questions, {"q0": "yes", "q1": "no"}, 100, 50)

    assert result["percentage"] == 50
    assert result["passed"] is True

    result = score_quiz(questions, {"q0": "yes", "q1": "no"}, 100, 50.01)
    assert result["passed"] is False


def test_only_first_configured_questions_are_scored():
    questions = quiz(1, 1, 1, 1)
    result = score_quiz(questions, {q["id"]: "yes" for q in questions}, 2, 40)

    assert result["totalQuestions"] == 2
    assert result["totalMarks"] == 2
    assert result["marksObtained"] == 2


def test_answer_must_match_exactly():
    result = score_quiz(quiz(1), {"q0": "Yes "}, 100, 40)
    assert result["score"] == 0


def test_no_questions():
    result = score_quiz([], {}, 100, 40)
    assert result["percentage"] == 0
    assert result["totalMarks"] == 0
    assert result["passed"] is False


def test_question_without_correct_option_never_scores():
    question = {"id": "q0", "options": [{"text": "a"}, {"text": "b"}]}
    assert correct_option_text(question) is None
    assert score_quiz([question], {"q0": "a"}, 100, 0)["marksObtained"] == 0


def test_percentage_of():
    assert percentage_of(2, 5) == 40
    assert percentage_of(0, 0) == 0
