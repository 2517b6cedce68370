from seice.services.scoring_service import (
    GRADED,
    MISSING_ANSWER,
    PENDING_REVIEW,
    percentage,
    round_half_up,
    score_submission,
)


def mc(correct, text='q'):
    return {"question": text, "questionType": "multiple-choice", "options": ['a', 'b', 'c', 'd'],
            "correctAnswer": correct}


def essay(text='Explique'):
    return {"question": text, "questionType": "essay"}


def test_half_correct_multiple_choice():
    outcome = score_submission([mc(1), mc(2)], [1, 0])

    assert outcome['score'] == 1
    assert outcome['totalQuestions'] == 2
    assert outcome['percentage'] == 50
    assert outcome['gradingStatus'] == GRADED
    assert [r['isCorrect'] for r in outcome['results']] == [True, False]


def test_essay_requires_manual_grading():
    outcome = score_submission([mc(0), essay()], [0], ['', 'Minha resposta'])

    assert outcome['gradingStatus'] == PENDING_REVIEW
    assert outcome['totalQuestions'] == 1
    assert outcome['totalEssayQuestions'] == 1
    assert outcome['percentage'] == 100
    essay_result = outcome['results'][1]
    assert essay_result['isCorrect'] is None
    assert essay_result['requiresManualGrading'] is True
    assert essay_result['essayAnswer'] == 'Minha resposta'


def test_essay_answer_defaults_to_empty_text():
    outcome = score_submission([essay()], [], None)

    assert outcome['results'][0]['essayAnswer'] == ''
    assert outcome['percentage'] == 0
    assert outcome['score'] == 0


def test_missing_answers_count_as_wrong():
    outcome = score_submission([mc(0), mc(1), mc(2)], [0])

    assert outcome['score'] == 1
    assert outcome['results'][1]['userAnswer'] == MISSING_ANSWER
    assert outcome['results'][2]['isCorrect'] is False
    assert outcome['percentage'] == 33


def test_null_answer_is_missing():
    outcome = score_submission([mc(0)], [None])

    assert outcome['results'][0]['userAnswer'] == MISSING_ANSWER
    assert outcome['score'] == 0


def test_boolean_never_matches_index():
    outcome = score_submission([mc(1), mc(0)], [True, False])

    assert outcome['score'] == 0


def test_no_answers_list_at_all():
    outcome = score_submission([mc(0), mc(1)], None)

    assert outcome['score'] == 0
    assert outcome['percentage'] == 0


def test_percentage_rounds_half_up():
    assert percentage(1, 8) == 13
    assert percentage(2, 3) == 67
    assert percentage(1, 3) == 33
    assert percentage(0, 0) == 0
    assert round_half_up(2.5) == 3
    assert round_half_up(4.49) == 4
