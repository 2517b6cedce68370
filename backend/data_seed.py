"""
Sembrado de datos de demo contra la API en ejecución.
Crea un profesor, series, alumnos, un banco de preguntas por materia,
monta un simulado, lo activa y registra algunas entregas.

Uso: python backend/data_seed.py  (con run.py levantado)
"""
import os
import random

import requests

BASE_URL = os.getenv('SEED_BASE_URL', "http://localhost:5000/api/v1")
HEADERS = {'Content-Type': 'application/json'}

DEMO_PROFESSOR = {"name": "Professora Demo", "email": "demo@seice.local", "password": "demo1234"}

SUBJECTS = ["Matemática", "Português", "Ciências"]
DIFFICULTIES = ["Fácil", "Médio", "Difícil"]
QUESTIONS_PER_SUBJECT = 6


def log(step, msg):
    print(f"\n[{step}] {msg}")


def request(method, endpoint, data=None):
    url = f"{BASE_URL}/{endpoint}"
    try:
        response = requests.request(method, url, json=data, headers=HEADERS, timeout=10)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        print(f"❌ Error en {method} {url}: {e}")
        return None


def post(endpoint, data=None):
    return request('POST', endpoint, data or {})


def put(endpoint, data=None):
    return request('PUT', endpoint, data or {})


def authenticate():
    # El alta falla si el profesor ya existe; se sigue con el login
    post("signup", DEMO_PROFESSOR)
    res = post("login", {"email": DEMO_PROFESSOR['email'], "password": DEMO_PROFESSOR['password']})
    if not res:
        raise SystemExit("No se pudo iniciar sesión con el profesor demo")
    HEADERS['Authorization'] = f"Bearer {res['accessToken']}"
    return res['user']


def build_question(subject, n):
    return {
        "question": f"{subject}: questão {n + 1}",
        "subject": subject,
        "difficulty": DIFFICULTIES[n % len(DIFFICULTIES)],
        "options": [f"Opção {letter}" for letter in "ABCD"],
        "correctAnswer": n % 4,
        "explanation": f"A alternativa correta é a {'ABCD'[n % 4]}.",
        "tags": [subject.lower()],
    }


def run_seed():
    print("🌱 INICIANDO SEMBRADO DE DATOS (SEICE)...")

    # 1. PROFESOR
    user = authenticate()
    log("1", f"Profesor autenticado: {user['email']}")

    # 2. SERIES
    series = []
    for grade, code in ((5, "5A"), (6, "6A")):
        res = post("series", {
            "name": f"{grade}º Ano",
            "code": code,
            "level": "fundamental1" if grade <= 5 else "fundamental2",
            "grade": grade,
            "maxStudents": 30,
        })
        if res:
            series.append(res['data'])
    log("2", f"{len(series)} series creadas")

    # 3. ALUMNOS
    students = []
    for i, name in enumerate(["Ana Souza", "Bruno Lima", "Carla Dias", "Diego Alves", "Elisa Rocha", "Felipe Melo"]):
        row = {"name": name, "email": f"aluno{i + 1}@seice.local", "registrationNumber": f"2024{i + 1:03d}"}
        if series:
            row["serieId"] = series[i % len(series)]['id']
        students.append(row)
    res = post("students", {"students": students})
    students = res['students'] if res else []
    log("3", f"{len(students)} alumnos importados")

    # 4. BANCO DE PREGUNTAS
    created = 0
    for subject in SUBJECTS:
        for n in range(QUESTIONS_PER_SUBJECT):
            if post("questions", build_question(subject, n)):
                created += 1
    post("questions", {
        "question": "Explique com suas palavras o ciclo da água.",
        "subject": "Ciências",
        "difficulty": "Médio",
        "questionType": "essay",
    })
    log("4", f"{created + 1} preguntas en el banco")

    # 5. SIMULADO
    res = post("simulados", {
        "title": "Simulado Bimestral",
        "description": "Avaliação diagnóstica do bimestre",
        "grade": "5º Ano",
        "subjects": SUBJECTS,
        "questionsPerSubject": 4,
        "timeLimit": 60,
    })
    if not res:
        print("❌ No se pudo montar el simulado")
        return
    exam = res['exam']
    put(f"exams/{exam['id']}", {"status": "Ativo"})
    log("5", f"Simulado {exam['id']} activo con {exam['totalQuestions']} preguntas")

    # 6. ENTREGAS
    for student in students:
        answers = [
            q.get('correctAnswer', 0) if random.random() < 0.6 else random.randrange(4)
            for q in exam['questions']
        ]
        res = post(f"exams/{exam['id']}/submit", {
            "answers": answers,
            "studentId": student['id'],
            "studentName": student['name'],
            "timeSpent": random.randint(20, 60),
        })
        if res:
            sub = res['submission']
            print(f"   ✅ {student['name']}: {sub['score']}/{sub['totalQuestions']} ({sub['percentage']}%)")

    stats = request('GET', "analytics/grading-stats")
    if stats:
        log("6", f"Promedio: {stats['stats']['averageScore']}% | Aprobación: {stats['stats']['passRate']}%")

    print("\n✅ SEMBRADO COMPLETO")


if __name__ == '__main__':
    run_seed()
