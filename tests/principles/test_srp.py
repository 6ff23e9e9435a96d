from solid_principles.domain.models import User
from solid_principles.principles.srp import original, refactored

EXPECTED = [
    "Salvando usuário: João, email: joao@email.com",
    "Enviando email para joao@email.com: Bem-vindo!",
]


def test_original_main_prints_save_and_send(printed_lines):
    original.main()

    assert printed_lines() == EXPECTED


def test_refactored_main_prints_save_and_send(printed_lines):
    refactored.main()

    assert printed_lines() == EXPECTED


def test_refactored_providers_are_independent(printed_lines):
    user = User(name="Ana", email="ana@email.com")

    refactored.UserRepository().save(user)
    assert printed_lines() == ["Salvando usuário: Ana, email: ana@email.com"]

    refactored.EmailService().send(user, "Olá")
    assert printed_lines() == ["Enviando email para ana@email.com: Olá"]


def test_repository_does_not_send_email():
    assert not hasattr(refactored.UserRepository(), "send")
    assert not hasattr(refactored.EmailService(), "save")
