"""
Plantilla OpenAPI/Swagger de la API SEICE.
Usado por Flasgger para documentación interactiva en /apidocs
"""

_ID = {"in": "path", "name": "id", "required": True, "type": "string"}
_BODY = {"in": "body", "name": "body", "schema": {"type": "object"}}
_AUTH = [{"Bearer": []}]


def _crud(tag, singular):
    """Colección + item con el patrón CRUD estándar."""
    return {
        "collection": {
            "get": {"tags": [tag], "summary": f"Listar {tag.lower()}", "security": _AUTH,
                    "responses": {"200": {"description": "Lista (vacía si el KV no responde)"}}},
            "post": {"tags": [tag], "summary": f"Crear {singular}", "security": _AUTH,
                     "parameters": [_BODY],
                     "responses": {"200": {"description": "Creado"}, "400": {"description": "Datos inválidos"}}},
        },
        "item": {
            "put": {"tags": [tag], "summary": f"Actualizar {singular}", "security": _AUTH,
                    "parameters": [_ID, _BODY],
                    "responses": {"200": {"description": "Actualizado"}, "404": {"description": "No encontrado"}}},
            "delete": {"tags": [tag], "summary": f"Eliminar {singular}", "security": _AUTH,
                       "parameters": [_ID],
                       "responses": {"200": {"description": "Eliminado"}}},
        },
    }


def build_swagger_template(prefix):
    students = _crud("Alunos", "aluno")
    questions = _crud("Questões", "questão")
    exams = _crud("Avaliações", "avaliação")
    classes = _crud("Turmas", "turma")
    applications = _crud("Aplicações", "aplicação")
    series = _crud("Séries", "série")

    students["collection"]["post"]["parameters"] = [{
        "in": "body",
        "name": "body",
        "required": True,
        "schema": {
            "type": "object",
            "required": ["students"],
            "properties": {
                "students": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "required": ["name"],
                        "properties": {
                            "name": {"type": "string"},
                            "email": {"type": "string", "format": "email"},
                            "registrationNumber": {"type": "string"},
                            "serieId": {"type": "string"},
                        },
                    },
                }
            },
        },
    }]
    questions["collection"]["post"]["parameters"] = [{
        "in": "body",
        "name": "body",
        "required": True,
        "schema": {
            "type": "object",
            "required": ["question", "subject", "difficulty"],
            "properties": {
                "question": {"type": "string"},
                "subject": {"type": "string", "example": "Matemática"},
                "difficulty": {"type": "string", "example": "Médio"},
                "questionType": {"type": "string", "enum": ["multiple-choice", "essay"]},
                "options": {"type": "array", "items": {"type": "string"}},
                "correctAnswer": {"type": "integer"},
                "explanation": {"type": "string"},
            },
        },
    }]
    series["item"]["get"] = {"tags": ["Séries"], "summary": "Obter série", "security": _AUTH,
                             "parameters": [_ID],
                             "responses": {"200": {"description": "Série"}, "404": {"description": "Não encontrada"}}}
    series["item"]["delete"]["responses"]["400"] = {"description": "Série possui alunos"}

    return {
        "swagger": "2.0",
        "info": {
            "title": "SEICE API",
            "description": "API de gestão de avaliações: alunos, banco de questões, simulados, correção e estatísticas.",
            "version": "1.0.0",
            "contact": {"name": "SEICE"},
        },
        "basePath": prefix,
        "schemes": ["http", "https"],
        "consumes": ["application/json"],
        "produces": ["application/json"],
        "securityDefinitions": {
            "Bearer": {"type": "apiKey", "name": "Authorization", "in": "header"}
        },
        "tags": [
            {"name": "Auth", "description": "Cadastro, login e sessão"},
            {"name": "Alunos", "description": "CRUD e importação de alunos"},
            {"name": "Questões", "description": "Banco de questões"},
            {"name": "Avaliações", "description": "Avaliações, entrega e acesso público"},
            {"name": "Simulados", "description": "Montagem de simulados"},
            {"name": "Entregas", "description": "Entregas, revisão e exportação"},
            {"name": "Imagens", "description": "Provas impressas escaneadas"},
            {"name": "Turmas", "description": "Gestão de turmas"},
            {"name": "Séries", "description": "Gestão de séries"},
            {"name": "Aplicações", "description": "Aplicações de avaliações"},
            {"name": "Estatísticas", "description": "Painel e estatísticas de correção"},
        ],
        "paths": {
            # --- AUTH ---
            "/signup": {"post": {"tags": ["Auth"], "summary": "Cadastrar professor", "parameters": [{
                "in": "body", "name": "body", "required": True,
                "schema": {"type": "object", "required": ["name", "email", "password"],
                           "properties": {"name": {"type": "string"}, "email": {"type": "string"},
                                          "password": {"type": "string"}}},
            }], "responses": {"200": {"description": "Usuário criado"}, "400": {"description": "Dados inválidos"}}}},
            "/login": {"post": {"tags": ["Auth"], "summary": "Obter token de acesso", "parameters": [_BODY],
                                "responses": {"200": {"description": "accessToken"},
                                              "401": {"description": "Credenciais inválidas"}}}},
            "/logout": {"post": {"tags": ["Auth"], "summary": "Encerrar sessão", "security": _AUTH,
                                 "responses": {"200": {"description": "Sessão encerrada"}}}},
            "/health": {"get": {"tags": ["Auth"], "summary": "Health check",
                                "responses": {"200": {"description": "ok"}}}},

            # --- ALUNOS ---
            "/students": students["collection"],
            "/students/{id}": {
                "get": {"tags": ["Alunos"], "summary": "Obter aluno", "security": _AUTH, "parameters": [_ID],
                        "responses": {"200": {"description": "Aluno"}, "404": {"description": "Não encontrado"}}},
                **students["item"],
            },

            # --- QUESTÕES ---
            "/questions": questions["collection"],
            "/questions/{id}": questions["item"],

            # --- AVALIAÇÕES ---
            "/exams": exams["collection"],
            "/exams/{id}": exams["item"],
            "/exams/{id}/submit": {"post": {
                "tags": ["Avaliações"], "summary": "Entregar e corrigir", "security": _AUTH,
                "parameters": [_ID, {
                    "in": "body", "name": "body",
                    "schema": {"type": "object", "properties": {
                        "answers": {"type": "array", "items": {"type": "integer"}},
                        "essayAnswers": {"type": "array", "items": {"type": "string"}},
                        "studentName": {"type": "string"},
                    }},
                }],
                "responses": {"200": {"description": "Entrega corrigida"}, "404": {"description": "Avaliação não encontrada"}},
            }},
            "/public/exam/{id}": {"get": {
                "tags": ["Avaliações"], "summary": "Avaliação ativa para alunos (sem gabarito)",
                "parameters": [_ID, {"in": "query", "name": "session", "required": True, "type": "string"}],
                "responses": {"200": {"description": "Avaliação"}, "404": {"description": "Não encontrada ou inativa"}},
            }},

            # --- SIMULADOS ---
            "/simulados": {"post": {"tags": ["Simulados"], "summary": "Montar simulado", "security": _AUTH,
                                    "parameters": [_BODY],
                                    "responses": {"200": {"description": "Simulado criado"},
                                                  "400": {"description": "Questões insuficientes"}}}},
            "/simulados/subjects": {"get": {"tags": ["Simulados"], "summary": "Questões disponíveis por matéria",
                                            "security": _AUTH,
                                            "parameters": [
                                                {"in": "query", "name": "questionsPerSubject", "type": "integer"},
                                                {"in": "query", "name": "difficulty", "type": "string"},
                                            ],
                                            "responses": {"200": {"description": "Disponibilidade"}}}},

            # --- ENTREGAS ---
            "/submissions": {
                "get": {"tags": ["Entregas"], "summary": "Listar entregas", "security": _AUTH,
                        "responses": {"200": {"description": "Lista"}}},
                "post": {"tags": ["Entregas"], "summary": "Registrar entrega", "security": _AUTH,
                         "parameters": [_BODY], "responses": {"200": {"description": "Registrada"}}},
            },
            "/submissions/{id}/review": {"put": {"tags": ["Entregas"], "summary": "Revisão manual",
                                                 "security": _AUTH, "parameters": [_ID, _BODY],
                                                 "responses": {"200": {"description": "Revisada"},
                                                               "404": {"description": "Não encontrada"}}}},
            "/submissions/bulk-export": {"post": {"tags": ["Entregas"], "summary": "Exportar entregas",
                                                  "security": _AUTH, "parameters": [_BODY],
                                                  "responses": {"200": {"description": "Exportação"}}}},

            # --- IMAGENS ---
            "/images": {
                "get": {"tags": ["Imagens"], "summary": "Listar imagens", "security": _AUTH,
                        "responses": {"200": {"description": "Lista"}}},
                "post": {"tags": ["Imagens"], "summary": "Registrar imagem escaneada", "security": _AUTH,
                         "parameters": [_BODY], "responses": {"200": {"description": "Em processamento"}}},
            },

            # --- TURMAS / SÉRIES / APLICAÇÕES ---
            "/classes": classes["collection"],
            "/classes/{id}": classes["item"],
            "/series": series["collection"],
            "/series/{id}": series["item"],
            "/series/{id}/students": {"get": {"tags": ["Séries"], "summary": "Alunos da série", "security": _AUTH,
                                              "parameters": [_ID], "responses": {"200": {"description": "Lista"}}}},
            "/applications": applications["collection"],
            "/applications/{id}": applications["item"],

            # --- ESTATÍSTICAS ---
            "/dashboard/stats": {"get": {"tags": ["Estatísticas"], "summary": "Resumo do painel", "security": _AUTH,
                                         "responses": {"200": {"description": "Estatísticas"}}}},
            "/analytics/grading-stats": {"get": {"tags": ["Estatísticas"], "summary": "Estatísticas de correção",
                                                 "security": _AUTH,
                                                 "responses": {"200": {"description": "Estatísticas"}}}},
        },
    }
