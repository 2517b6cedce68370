import re

from seice.services.exam_service import generate_exam_id
from seice.services.kv_store import KVStore

QUESTION = {"question": 'Quanto é 2 + 2?', "subject": 'Matemática', "difficulty": 'Fácil'}


def make_exam(client, api, headers, **fields):
    payload = {
        "title": 'Prova 1',
        "description": 'Bimestral',
        "timeLimit": 60,
        "questions": [
            {"question": 'A', "options": ['1', '2', '3'], "correctAnswer": 1, "explanation": 'porque sim'},
            {"question": 'B', "options": ['1', '2', '3'], "correctAnswer": 2},
        ],
        **fields,
    }
    return client.post(api('/exams'), json=payload, headers=headers).get_json()['exam']


# --- QUESTÕES ---

def test_create_question_applies_defaults(client, api, headers, professor):
    res = client.post(api('/questions'), json=QUESTION, headers=headers)

    assert res.status_code == 200
    question = res.get_json()['question']
    assert question['type'] == 'Múltipla Escolha'
    assert question['questionType'] == 'multiple-choice'
    assert question['options'] == []
    assert question['correctAnswer'] == 0
    assert question['tags'] == []
    assert question['explanation'] == ''
    assert question['usageCount'] == 0
    assert question['isActive'] is True
    assert question['userId'] == professor['id']


def test_create_essay_question(client, api, headers):
    res = client.post(api('/questions'), json={**QUESTION, "questionType": 'essay'}, headers=headers)

    assert res.get_json()['question']['questionType'] == 'essay'


def test_create_question_requires_fields(client, api, headers):
    res = client.post(api('/questions'), json={"question": 'Sem matéria'}, headers=headers)

    assert res.status_code == 400
    body = res.get_json()
    assert body['success'] is False
    assert body['error'] == 'Missing required fields: question, subject, difficulty'


def test_create_question_fails_when_read_back_is_empty(client, api, headers, monkeypatch):
    original_get = KVStore.get
    monkeypatch.setattr(KVStore, 'get', lambda key: None if key.startswith('questions:') else original_get(key))

    res = client.post(api('/questions'), json=QUESTION, headers=headers)

    assert res.status_code == 500
    assert res.get_json()['error'] == 'Failed to persist question data'


def test_question_list_update_delete(client, api, headers, professor):
    question = client.post(api('/questions'), json=QUESTION, headers=headers).get_json()['question']
    KVStore.set(f"questions:{professor['id']}:partial", {"id": 'partial', "question": 'sem matéria'})

    listed = client.get(api('/questions'), headers=headers).get_json()
    assert listed['count'] == 1

    res = client.put(api(f"/questions/{question['id']}"), json={"isActive": False}, headers=headers)
    assert res.get_json()['question']['isActive'] is False

    assert client.put(api('/questions/missing'), json={}, headers=headers).status_code == 404
    assert client.delete(api(f"/questions/{question['id']}"), headers=headers).status_code == 200
    assert client.get(api('/questions'), headers=headers).get_json()['count'] == 0


# --- AVALIAÇÕES ---

def test_generated_exam_id_format():
    assert re.fullmatch(r'EVAL\d{6}', generate_exam_id())


def test_create_exam_defaults(client, api, headers):
    exam = make_exam(client, api, headers, status='Ativo', appliedCount=99)

    assert exam['id'].startswith('EVAL')
    assert exam['status'] == 'Rascunho'
    assert exam['appliedCount'] == 0
    assert exam['studentsCount'] == 0
    assert exam['averageScore'] == 0


def test_exam_list_counts_active(client, api, headers):
    first = make_exam(client, api, headers)
    make_exam(client, api, headers, title='Prova 2')
    client.put(api(f"/exams/{first['id']}"), json={"status": 'Ativo'}, headers=headers)

    listed = client.get(api('/exams'), headers=headers).get_json()

    assert listed['count'] == 2
    assert listed['activeCount'] == 1


def test_exam_update_and_delete(client, api, headers):
    exam = make_exam(client, api, headers)

    assert client.put(api('/exams/EVAL999999'), json={}, headers=headers).status_code == 404
    assert client.delete(api(f"/exams/{exam['id']}"), headers=headers).status_code == 200
    assert client.get(api('/exams'), headers=headers).get_json()['count'] == 0


# --- ACCESO PÚBLICO ---

def test_public_exam_requires_session(client, api, headers):
    exam = make_exam(client, api, headers)

    res = client.get(api(f"/public/exam/{exam['id']}"))

    assert res.status_code == 400
    assert res.get_json()['error'] == 'Session ID required'


def test_public_exam_must_be_active(client, api, headers):
    exam = make_exam(client, api, headers)

    res = client.get(api(f"/public/exam/{exam['id']}?session=s1"))
    assert res.status_code == 404
    assert res.get_json()['error'] == 'Exam not found or not active'

    assert client.get(api('/public/exam/EVAL000000?session=s1')).status_code == 404


def test_public_exam_hides_answer_key(client, api, headers):
    exam = make_exam(client, api, headers)
    client.put(api(f"/exams/{exam['id']}"), json={"status": 'Ativo'}, headers=headers)

    res = client.get(api(f"/public/exam/{exam['id']}?session=s1"))

    assert res.status_code == 200
    body = res.get_json()
    assert body['sessionId'] == 's1'
    public = body['exam']
    assert public['title'] == 'Prova 1'
    assert public['timeLimit'] == 60
    assert 'status' not in public
    assert 'userId' not in public
    assert [q['options'] for q in public['questions']] == [['1', '2', '3'], ['1', '2', '3']]
    assert all('correctAnswer' not in q and 'explanation' not in q for q in public['questions'])


# --- ENTREGA ---

def test_submit_scores_and_stores(client, api, headers, professor):
    exam = make_exam(client, api, headers)

    res = client.post(api(f"/exams/{exam['id']}/submit"), json={
        "answers": [1, 0], "studentName": 'Ana', "timeSpent": 12,
    }, headers=headers)

    assert res.status_code == 200
    sub = res.get_json()['submission']
    assert sub['examId'] == exam['id']
    assert sub['examTitle'] == 'Prova 1'
    assert sub['userId'] == professor['id']
    assert sub['score'] == 1
    assert sub['totalQuestions'] == 2
    assert sub['percentage'] == 50
    assert sub['gradingStatus'] == 'graded'
    assert sub['studentName'] == 'Ana'
    assert sub['timeSpent'] == 12
    assert sub['results'][0]['explanation'] == 'porque sim'

    listed = client.get(api('/submissions'), headers=headers).get_json()
    assert listed['count'] == 1
    assert listed['gradedCount'] == 1


def test_resubmission_creates_new_record(client, api, headers):
    exam = make_exam(client, api, headers)

    for _ in range(2):
        client.post(api(f"/exams/{exam['id']}/submit"), json={"answers": [1, 2]}, headers=headers)

    assert client.get(api('/submissions'), headers=headers).get_json()['count'] == 2


def test_submit_with_essay_is_pending_review(client, api, headers):
    exam = make_exam(client, api, headers, title=None, questions=[
        {"question": 'A', "options": ['x', 'y'], "correctAnswer": 0},
        {"question": 'Redação', "questionType": 'essay'},
    ])

    res = client.post(api(f"/exams/{exam['id']}/submit"), json={
        "answers": [0], "essayAnswers": [None, 'Texto'],
    }, headers=headers)

    sub = res.get_json()['submission']
    assert sub['examTitle'] == 'Simulado'
    assert sub['gradingStatus'] == 'pending-review'
    assert sub['totalEssayQuestions'] == 1
    assert sub['percentage'] == 100
    assert sub['results'][1]['essayAnswer'] == 'Texto'


def test_submit_to_another_professors_exam(client, api, headers, make_professor):
    exam = make_exam(client, api, headers)
    student = make_professor(email='aluno@escola.br')

    res = client.post(api(f"/exams/{exam['id']}/submit"), json={"answers": [1, 2]},
                      headers=student['headers'])

    assert res.status_code == 200
    sub = res.get_json()['submission']
    assert sub['userId'] == student['id']
    assert sub['percentage'] == 100


def test_submit_unknown_exam(client, api, headers):
    res = client.post(api('/exams/EVAL000000/submit'), json={"answers": []}, headers=headers)

    assert res.status_code == 404
    assert res.get_json()['error'] == 'Exam not found'


def test_submit_exam_without_questions(client, api, headers):
    exam = client.post(api('/exams'), json={"title": 'Vazia'}, headers=headers).get_json()['exam']

    res = client.post(api(f"/exams/{exam['id']}/submit"), json={"answers": []}, headers=headers)

    assert res.status_code == 400
    assert res.get_json()['error'] == 'Exam has no questions'
