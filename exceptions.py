"""
Exceptions raised by the vocational test.

Fatal errors (``fatal = True``) end the session: the only event accepted
afterwards is a restart. The others leave the session untouched so the
respondent can simply try again.
"""


class VocationalTestError(Exception):
    """Base class for every error raised by the vocational test"""
    fatal = False
    message = "Erro no teste vocacional."

    def __init__(self, detail=None):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class CatalogLoadError(VocationalTestError):
    fatal = True
    message = "Erro ao carregar os dados do teste."


class NicknameTakenError(VocationalTestError):
    message = "Apelido já em uso. Por favor, escolha outro."

    def __init__(self, nickname, detail=None):
        super().__init__(detail)
        self.nickname = nickname


class RegistrationError(VocationalTestError):
    fatal = True
    message = "Erro ao cadastrar usuário. Tente novamente."


class SubmissionError(VocationalTestError):
    fatal = True
    message = "Erro ao enviar suas respostas."

    STEP_MESSAGES = {
        'save_answers': "Erro ao salvar suas respostas.",
        'compute_result': "Erro ao calcular o resultado.",
        'save_result': "Erro ao salvar o resultado final.",
        'save_history': "Erro ao salvar o histórico.",
    }

    def __init__(self, step, detail=None):
        super().__init__(detail or self.STEP_MESSAGES.get(step, self.message))
        self.step = step


class DataIntegrityError(SubmissionError):
    """Stored data does not have the shape the scoring needs"""

    def __init__(self, detail, step='compute_result'):
        super().__init__(step, detail)


class InvalidNicknameError(VocationalTestError):
    message = "Informe um apelido para começar o teste."


class InvalidTransitionError(VocationalTestError):
    message = "Ação não permitida neste momento."


class InvalidAnswerError(VocationalTestError):
    message = "Opção inválida para a questão atual."


class SessionFailedError(VocationalTestError):
    message = "O teste foi interrompido por um erro. Reinicie para continuar."
