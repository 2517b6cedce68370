import pytest


@pytest.fixture
def exam(client, api, headers):
    payload = {
        "title": 'Prova mista',
        "questions": [
            {"question": 'A', "options": ['x', 'y'], "correctAnswer": 1},
            {"question": 'Redação', "questionType": 'essay'},
            {"question": 'C', "options": ['x', 'y'], "correctAnswer": 0},
        ],
    }
    return client.post(api('/exams'), json=payload, headers=headers).get_json()['exam']


@pytest.fixture
def submission(client, api, headers, exam):
    res = client.post(api(f"/exams/{exam['id']}/submit"), json={
        "answers": [1, None, 1], "essayAnswers": ['', 'Minha redação', ''], "studentName": 'Ana',
    }, headers=headers)
    return res.get_json()['submission']


def test_record_submission_updates_exam(client, api, headers, exam, professor):
    for name in ('Ana', 'Bruno'):
        res = client.post(api('/submissions'), json={
            "examId": exam['id'], "studentName": name, "percentage": 80, "gradingStatus": 'graded',
        }, headers=headers)
        assert res.status_code == 200
        assert res.get_json()['submission']['userId'] == professor['id']

    stored = next(e for e in client.get(api('/exams'), headers=headers).get_json()['exams']
                  if e['id'] == exam['id'])
    assert stored['appliedCount'] == 2
    assert stored['studentsCount'] == 2
    assert 'lastApplied' in stored


def test_record_submission_for_missing_exam(client, api, headers):
    res = client.post(api('/submissions'), json={"examId": 'EVAL000000', "percentage": 10}, headers=headers)

    assert res.status_code == 200
    assert client.get(api('/submissions'), headers=headers).get_json()['count'] == 1


def test_review_sets_status_and_notes(client, api, headers, submission, professor):
    res = client.put(api(f"/submissions/{submission['id']}/review"), json={
        "reviewNotes": 'Boa argumentação', "feedback": 'Parabéns',
    }, headers=headers)

    assert res.status_code == 200
    reviewed = res.get_json()['submission']
    assert reviewed['gradingStatus'] == 'reviewed'
    assert reviewed['reviewNotes'] == 'Boa argumentação'
    assert reviewed['feedback'] == 'Parabéns'
    assert reviewed['reviewedBy'] == professor['id']
    assert reviewed['reviewedAt'].endswith('Z')


def test_review_grades_essays(client, api, headers, submission):
    assert submission['percentage'] == 50
    assert submission['gradingStatus'] == 'pending-review'

    res = client.put(api(f"/submissions/{submission['id']}/review"), json={
        "essayGrades": {"1": True},
    }, headers=headers)

    reviewed = res.get_json()['submission']
    essay = reviewed['results'][1]
    assert essay['isCorrect'] is True
    assert essay['requiresManualGrading'] is False
    assert reviewed['essayScore'] == 1
    assert reviewed['percentage'] == 50


def test_review_rejects_non_essay_index(client, api, headers, submission):
    res = client.put(api(f"/submissions/{submission['id']}/review"), json={
        "essayGrades": {"0": True},
    }, headers=headers)

    assert res.status_code == 400
    assert res.get_json()['error'] == 'Question 0 is not an essay question'


def test_review_missing_submission(client, api, headers):
    res = client.put(api('/submissions/missing/review'), json={}, headers=headers)

    assert res.status_code == 404
    assert res.get_json()['error'] == 'Submission not found'


def test_bulk_export(client, api, headers, submission):
    res = client.post(api('/submissions/bulk-export'), json={
        "submissionIds": [submission['id'], 'missing'],
    }, headers=headers)

    assert res.status_code == 200
    export = res.get_json()['export']
    assert export['format'] == 'csv'
    assert export['totalSubmissions'] == 1
    row = export['data'][0]
    assert row['studentName'] == 'Ana'
    assert row['examTitle'] == 'Prova mista'
    assert row['score'] == 1
    assert row['totalQuestions'] == 2
    assert row['percentage'] == 50
    assert row['timeSpent'] == 0
    assert row['gradingStatus'] == 'pending-review'
    assert row['submittedAt'] == submission['submittedAt']


def test_bulk_export_requires_ids(client, api, headers):
    for payload in ({}, {"submissionIds": []}, {"submissionIds": 'abc'}):
        res = client.post(api('/submissions/bulk-export'), json=payload, headers=headers)
        assert res.status_code == 400
        assert res.get_json()['error'] == 'Submission IDs are required'


def test_review_rejects_non_boolean_grade(client, api, headers, submission):
    res = client.put(api(f"/submissions/{submission['id']}/review"), json={
        "essayGrades": {"1": 'false'},
    }, headers=headers)

    assert res.status_code == 400
    assert res.get_json()['error'] == 'Grade for question 1 must be true or false'
    stored = client.get(api('/submissions'), headers=headers).get_json()['submissions'][0]
    assert stored['gradingStatus'] == 'pending-review'
