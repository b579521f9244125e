AREA_TECH = "Áreas Técnicas e Científicas"
AREA_CREATIVE = "Áreas Criativas"
AREA_HEALTH = "Áreas de Saúde e Bem-Estar"
AREA_BUSINESS = "Áreas de Administração e Negócios"
AREA_SOCIAL = "Áreas Humanas e Sociais"
AREA_MEDIA = "Áreas de Comunicação e Mídia"

QUESTIONS = [
    {
        "question_id": 1,
        "text": "O que você mais gosta de fazer no seu tempo livre?",
        "options": [
            {
                "option_id": 11,
                "text": "Montar, consertar ou programar coisas",
                "scoring": [{"area": AREA_TECH, "value": 3}]
            },
            {
                "option_id": 12,
                "text": "Desenhar, pintar ou criar algo novo",
                "scoring": [{"area": AREA_CREATIVE, "value": 3}]
            },
            {
                "option_id": 13,
                "text": "Cuidar de alguém ou praticar atividades físicas",
                "scoring": [{"area": AREA_HEALTH, "value": 2}, {"area": AREA_SOCIAL, "value": 1}]
            },
            {
                "option_id": 14,
                "text": "Escrever, gravar vídeos ou postar nas redes",
                "scoring": [{"area": AREA_MEDIA, "value": 3}]
            }
        ]
    },
    {
        "question_id": 2,
        "text": "Qual matéria da escola você prefere?",
        "options": [
            {
                "option_id": 21,
                "text": "Matemática ou Física",
                "scoring": [{"area": AREA_TECH, "value": 3}]
            },
            {
                "option_id": 22,
                "text": "Artes",
                "scoring": [{"area": AREA_CREATIVE, "value": 3}]
            },
            {
                "option_id": 23,
                "text": "Biologia",
                "scoring": [{"area": AREA_HEALTH, "value": 3}]
            },
            {
                "option_id": 24,
                "text": "História ou Sociologia",
                "scoring": [{"area": AREA_SOCIAL, "value": 3}]
            }
        ]
    },
    {
        "question_id": 3,
        "text": "Em um trabalho em grupo, qual papel você costuma assumir?",
        "options": [
            {
                "option_id": 31,
                "text": "Organizo as tarefas e os prazos",
                "scoring": [{"area": AREA_BUSINESS, "value": 3}]
            },
            {
                "option_id": 32,
                "text": "Apresento o trabalho para a turma",
                "scoring": [{"area": AREA_MEDIA, "value": 2}, {"area": AREA_BUSINESS, "value": 1}]
            },
            {
                "option_id": 33,
                "text": "Cuido da parte visual",
                "scoring": [{"area": AREA_CREATIVE, "value": 2}]
            },
            {
                "option_id": 34,
                "text": "Ajudo quem está com dificuldade",
                "scoring": [{"area": AREA_SOCIAL, "value": 2}, {"area": AREA_HEALTH, "value": 1}]
            }
        ]
    },
    {
        "question_id": 4,
        "text": "Qual ambiente de trabalho combina mais com você?",
        "options": [
            {
                "option_id": 41,
                "text": "Laboratório ou escritório de tecnologia",
                "scoring": [{"area": AREA_TECH, "value": 2}]
            },
            {
                "option_id": 42,
                "text": "Hospital, clínica ou consultório",
                "scoring": [{"area": AREA_HEALTH, "value": 3}]
            },
            {
                "option_id": 43,
                "text": "Empresa, banco ou escritório",
                "scoring": [{"area": AREA_BUSINESS, "value": 3}]
            },
            {
                "option_id": 44,
                "text": "Estúdio, redação ou agência",
                "scoring": [{"area": AREA_MEDIA, "value": 2}, {"area": AREA_CREATIVE, "value": 1}]
            }
        ]
    },
    {
        "question_id": 5,
        "text": "Que tipo de problema você gostaria de resolver?",
        "options": [
            {
                "option_id": 51,
                "text": "Fazer uma máquina ou sistema funcionar melhor",
                "scoring": [{"area": AREA_TECH, "value": 3}]
            },
            {
                "option_id": 52,
                "text": "Melhorar a saúde das pessoas",
                "scoring": [{"area": AREA_HEALTH, "value": 3}]
            },
            {
                "option_id": 53,
                "text": "Reduzir desigualdades na comunidade",
                "scoring": [{"area": AREA_SOCIAL, "value": 3}]
            },
            {
                "option_id": 54,
                "text": "Fazer um negócio crescer",
                "scoring": [{"area": AREA_BUSINESS, "value": 3}]
            }
        ]
    },
    {
        "question_id": 6,
        "text": "Qual dessas atividades você faria por um dia inteiro?",
        "options": [
            {
                "option_id": 61,
                "text": "Criar a identidade visual de uma marca",
                "scoring": [{"area": AREA_CREATIVE, "value": 3}]
            },
            {
                "option_id": 62,
                "text": "Entrevistar pessoas para uma reportagem",
                "scoring": [{"area": AREA_MEDIA, "value": 3}]
            },
            {
                "option_id": 63,
                "text": "Dar aula para um grupo de crianças",
                "scoring": [{"area": AREA_SOCIAL, "value": 3}]
            },
            {
                "option_id": 64,
                "text": "Analisar dados de uma pesquisa",
                "scoring": [{"area": AREA_TECH, "value": 2}, {"area": AREA_BUSINESS, "value": 1}]
            }
        ]
    },
    {
        "question_id": 7,
        "text": "Como você prefere aprender algo novo?",
        "options": [
            {
                "option_id": 71,
                "text": "Testando na prática até funcionar",
                "scoring": [{"area": AREA_TECH, "value": 1}, {"area": AREA_CREATIVE, "value": 1}]
            },
            {
                "option_id": 72,
                "text": "Conversando com outras pessoas",
                "scoring": [{"area": AREA_SOCIAL, "value": 1}, {"area": AREA_MEDIA, "value": 1}]
            },
            {
                "option_id": 73,
                "text": "Lendo e fazendo resumos",
                "scoring": [{"area": AREA_HEALTH, "value": 1}, {"area": AREA_BUSINESS, "value": 1}]
            },
            {
                "option_id": 74,
                "text": "Tanto faz",
                "scoring": []
            }
        ]
    },
    {
        "question_id": 8,
        "text": "Qual frase descreve melhor o seu objetivo profissional?",
        "options": [
            {
                "option_id": 81,
                "text": "Inventar ou construir algo que ainda não existe",
                "scoring": [{"area": AREA_TECH, "value": 2}, {"area": AREA_CREATIVE, "value": 1}]
            },
            {
                "option_id": 82,
                "text": "Cuidar do bem-estar das pessoas",
                "scoring": [{"area": AREA_HEALTH, "value": 2}, {"area": AREA_SOCIAL, "value": 1}]
            },
            {
                "option_id": 83,
                "text": "Liderar equipes e tomar decisões",
                "scoring": [{"area": AREA_BUSINESS, "value": 3}]
            },
            {
                "option_id": 84,
                "text": "Contar histórias que muita gente vai ver",
                "scoring": [{"area": AREA_MEDIA, "value": 2}, {"area": AREA_CREATIVE, "value": 1}]
            }
        ]
    }
]
